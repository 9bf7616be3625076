from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User, WatchlistEntry


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ('email', 'name', 'watchlist_owner_id', 'auth_provider', 'is_active', 'created_at')
    list_filter = ('auth_provider', 'is_active', 'is_staff')
    search_fields = ('email', 'name', 'external_id')
    ordering = ('email',)
    readonly_fields = ('created_at', 'last_login')

    fieldsets = (
        (None, {'fields': ('email', 'password', 'name')}),
        ('Identity', {'fields': ('auth_provider', 'external_id', 'email_verified')}),
        ('Permissions', {'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')}),
        ('Dates', {'fields': ('last_login', 'created_at')}),
    )
    add_fieldsets = (
        (None, {'classes': ('wide',), 'fields': ('email', 'name', 'password1', 'password2')}),
    )

    @admin.display(description='Watchlist owner id')
    def watchlist_owner_id(self, obj):
        return obj.watchlist_owner_id


@admin.register(WatchlistEntry)
class WatchlistEntryAdmin(admin.ModelAdmin):
    list_display = ('symbol', 'company', 'user_id', 'added_at')
    list_filter = ('symbol',)
    search_fields = ('symbol', 'company', 'user_id')
    ordering = ('user_id', 'symbol')
    readonly_fields = ('added_at',)
