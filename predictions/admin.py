from django.contrib import admin

from .models import Prediction


@admin.register(Prediction)
class PredictionAdmin(admin.ModelAdmin):
    list_display = ['id', 'student', 'predicted_grade', 'created_at']
    list_filter = ['created_at']
    search_fields = ['student__name', 'student__user__email', 'feedback']
    readonly_fields = ['created_at']
    raw_id_fields = ['student']
