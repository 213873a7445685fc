from django.contrib import admin

from .models import Student


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'user', 'created_at']
    list_filter = ['created_at']
    search_fields = ['name', 'user__email', 'user__name']
    raw_id_fields = ['user']
