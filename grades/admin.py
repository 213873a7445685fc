from django.contrib import admin
from .models import Grade


@admin.register(Grade)
class GradeAdmin(admin.ModelAdmin):
    list_display = ['student', 'value', 'date']
    list_filter = ['date']
    search_fields = ['student__name', 'student__user__email']
    raw_id_fields = ['student']
    date_hierarchy = 'date'
