from django.contrib import admin

from .models import Post, PostMedia, PostSection, PostTag, Tag


class PostMediaInline(admin.TabularInline):
    model = PostMedia
    extra = 0


class PostTagInline(admin.TabularInline):
    model = PostTag
    extra = 0


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ("id", "author_email", "place", "section", "approved", "is_private", "created_at")
    list_filter = ("approved", "is_private", "section")
    search_fields = ("author_email", "author_name", "place", "description")
    inlines = [PostMediaInline, PostTagInline]


@admin.register(PostSection)
class PostSectionAdmin(admin.ModelAdmin):
    list_display = ("name", "display_order")
    ordering = ("display_order", "id")


admin.site.register(Tag)
