from django.contrib import admin

from .models import AdminProfile


@admin.register(AdminProfile)
class AdminProfileAdmin(admin.ModelAdmin):
    list_display = ['user', 'is_admin', 'created_at']
    list_filter = ['is_admin']
    list_editable = ['is_admin']
    search_fields = ['user__email', 'user__username']
    raw_id_fields = ['user']
