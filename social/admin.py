from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from social.models import Comment, Notification, Post, Reply, User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin for accounts, exposing role and profile fields."""
    list_display = ("username", "email", "fullname", "role", "created_at")
    list_filter = ("role", "is_active")
    search_fields = ("username", "email", "fullname")
    ordering = ("-created_at",)
    fieldsets = BaseUserAdmin.fieldsets + (
        ("Profile", {"fields": ("fullname", "role", "link", "profile_img", "cover_img")}),
    )


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "created_at")
    search_fields = ("content",)


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "post", "created_at")
    search_fields = ("content",)


@admin.register(Reply)
class ReplyAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "comment", "created_at")


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ("id", "recipient", "sender", "notification_type", "is_read", "created_at")
    list_filter = ("notification_type", "is_read")
