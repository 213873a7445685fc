"""
Admin interface for assignments
"""
from django.contrib import admin
from django.utils.html import format_html

from assignment.models import Assignment


@admin.register(Assignment)
class AssignmentAdmin(admin.ModelAdmin):
    """Admin interface for Assignment"""

    list_display = [
        'id',
        'student',
        'file_link',
        'submitted_at',
    ]

    list_filter = [
        'submitted_at',
    ]

    search_fields = [
        'file_url',
        'student__name',
        'student__user__email',
    ]

    raw_id_fields = ['student']
    date_hierarchy = 'submitted_at'

    def file_link(self, obj):
        return format_html('<a href="{}" target="_blank">{}</a>', obj.file_url, obj.file_url)
    file_link.short_description = 'File'
