from django.contrib import admin
from django.utils.html import format_html
from import_export import fields, resources
from import_export.admin import ImportExportModelAdmin
from import_export.widgets import ForeignKeyWidget
from simple_history.admin import SimpleHistoryAdmin

from .models import ParentProduct, ProductVariant
from .utils import format_price_clp


# =============================================================================
# Import/Export Resources
# =============================================================================

class ProductVariantResource(resources.ModelResource):
    """Resource for importing/exporting variants."""

    parent_name = fields.Field(
        column_name='parent_name',
        attribute='parent',
        widget=ForeignKeyWidget(ParentProduct, 'name')
    )

    class Meta:
        model = ProductVariant
        fields = (
            'id', 'parent_name', 'variant_name', 'price', 'stock',
            'attributes', 'images', 'dimensions', 'is_default'
        )
        export_order = fields


class ParentProductResource(resources.ModelResource):

    class Meta:
        model = ParentProduct
        fields = ('id', 'name', 'description', 'category', 'highlighted', 'age_recommendation')


# =============================================================================
# Inlines
# =============================================================================

class ProductVariantInline(admin.TabularInline):
    model = ProductVariant
    extra = 0
    fields = ['variant_name', 'price', 'stock', 'attributes', 'is_default']
    show_change_link = True


# =============================================================================
# Model Admins
# =============================================================================

@admin.register(ParentProduct)
class ParentProductAdmin(ImportExportModelAdmin, SimpleHistoryAdmin):
    resource_class = ParentProductResource
    list_display = ['name', 'category', 'highlighted', 'variant_count', 'created_at']
    list_filter = ['category', 'highlighted', 'created_at']
    list_editable = ['highlighted']
    search_fields = ['name', 'description']
    readonly_fields = ['variant_count', 'created_at', 'updated_at']
    inlines = [ProductVariantInline]

    fieldsets = (
        (None, {
            'fields': ('name', 'description', 'category', 'highlighted', 'age_recommendation')
        }),
        ('Información', {
            'fields': ('variant_count', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


@admin.register(ProductVariant)
class ProductVariantAdmin(ImportExportModelAdmin, SimpleHistoryAdmin):
    resource_class = ProductVariantResource
    list_display = [
        'variant_name', 'parent', 'price_display', 'stock',
        'stock_status', 'is_default', 'main_image_preview'
    ]
    list_filter = ['parent', 'is_default']
    list_editable = ['stock', 'is_default']
    search_fields = ['variant_name', 'parent__name']
    autocomplete_fields = ['parent']
    readonly_fields = ['created_at', 'updated_at', 'is_in_stock']
    list_per_page = 50

    fieldsets = (
        (None, {
            'fields': ('parent', 'variant_name', 'is_default')
        }),
        ('Precio y stock', {
            'fields': ('price', 'stock', 'is_in_stock')
        }),
        ('Detalle', {
            'fields': ('attributes', 'images', 'description', 'dimensions')
        }),
        ('Información', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    actions = ['mark_as_default', 'mark_out_of_stock']

    def price_display(self, obj):
        return format_price_clp(obj.price)
    price_display.short_description = 'Precio'

    def stock_status(self, obj):
        if obj.stock <= 0:
            return format_html('<span style="color: red;">{}</span>', 'Sin stock')
        return format_html('<span style="color: green;">{} unidad{}</span>', obj.stock, '' if obj.stock == 1 else 'es')
    stock_status.short_description = 'Estado stock'

    def main_image_preview(self, obj):
        if obj.images:
            return format_html('<img src="{}" style="max-height: 40px; max-width: 60px;" />', obj.images[0])
        return '-'
    main_image_preview.short_description = 'Imagen'

    @admin.action(description='Marcar como variante por defecto')
    def mark_as_default(self, request, queryset):
        count = 0
        for variant in queryset:
            ProductVariant.objects.filter(parent=variant.parent).exclude(pk=variant.pk).update(is_default=False)
            ProductVariant.objects.filter(pk=variant.pk).update(is_default=True)
            count += 1
        self.message_user(request, f'{count} variantes marcadas por defecto.')

    @admin.action(description='Marcar como sin stock')
    def mark_out_of_stock(self, request, queryset):
        count = queryset.update(stock=0)
        self.message_user(request, f'{count} variantes actualizadas.')


# =============================================================================
# Admin Site Configuration
# =============================================================================

admin.site.site_header = "Santi's - Administración"
admin.site.site_title = "Santi's"
admin.site.index_title = 'Panel de Administración'
