from django.contrib import admin
from .models import Category, Project, ProjectTechnology, Review, Technology


class ProjectTechnologyInline(admin.TabularInline):
    model = ProjectTechnology
    extra = 0


class ReviewInline(admin.TabularInline):
    model = Review
    extra = 0
    readonly_fields = ('reviewer', 'status', 'comment', 'created_at')
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


class ProjectAdmin(admin.ModelAdmin):
    list_display = ('title', 'student', 'faculty', 'category', 'status', 'created_at')
    list_filter = ('status', 'faculty', 'category', 'created_at')
    search_fields = ('title', 'description', 'student__full_name', 'student__user__email')
    date_hierarchy = 'created_at'
    inlines = [ProjectTechnologyInline, ReviewInline]


class ReviewAdmin(admin.ModelAdmin):
    list_display = ('project', 'reviewer', 'status', 'created_at')
    list_filter = ('status', 'created_at')
    search_fields = ('project__title', 'reviewer__full_name', 'comment')
    readonly_fields = ('created_at',)


admin.site.register(Project, ProjectAdmin)
admin.site.register(Review, ReviewAdmin)
admin.site.register(Category)
admin.site.register(Technology)
