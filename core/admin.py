from django.contrib import admin

from .models import Restaurant, Table


class TableInline(admin.TabularInline):
    model = Table
    extra = 0
    fields = ("number", "capacity", "photo_url")
    ordering = ("number",)


@admin.register(Restaurant)
class RestaurantAdmin(admin.ModelAdmin):
    list_display = ("subdomain", "name", "email", "max_capacity", "created_at")
    search_fields = ("subdomain", "name", "email")
    readonly_fields = ("created_at", "updated_at")
    inlines = [TableInline]

    fieldsets = (
        ("Basic Information", {
            "fields": ("subdomain", "name", "email", "max_capacity")
        }),
        ("Timestamps", {
            "fields": ("created_at", "updated_at"),
            "classes": ("collapse",)
        }),
    )


@admin.register(Table)
class TableAdmin(admin.ModelAdmin):
    list_display = ("number", "restaurant", "capacity", "created_at")
    list_filter = ("restaurant",)
    search_fields = ("restaurant__subdomain", "restaurant__name")
    ordering = ("restaurant", "number")
    readonly_fields = ("created_at",)
