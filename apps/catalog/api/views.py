from rest_framework import filters, status, viewsets
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from django_filters.rest_framework import DjangoFilterBackend

from apps.accounts.permissions import IsStoreAdmin, IsStoreAdminOrReadOnly
from apps.catalog.models import ParentProduct, ProductVariant
from apps.catalog.services import (
    QueryStringLocation,
    VariantNavigationService,
    VariantSelectionSynchronizer,
    build_display_products,
    filter_by_category,
    get_catalog_client,
    group_by_category,
    search_products,
)
from apps.catalog.services.category_grouping import category_info
from apps.catalog.services.storage import delete_files, upload_files
from apps.catalog.utils import build_whatsapp_url, format_price_clp
from .filters import VariantFilter
from .serializers import (
    AttributeSelectionSerializer,
    DisplayProductSerializer,
    ImageDeleteSerializer,
    ParentProductSerializer,
    ProductVariantSerializer,
    serialize_categories,
)

# Query parameters that are part of a request, not of the shareable location.
NON_LOCATION_PARAMS = ('axis', 'value', 'format')


def _location_from_request(request):
    params = request.query_params.copy()
    for name in NON_LOCATION_PARAMS:
        params.pop(name, None)
    return QueryStringLocation(params)


def _selection_payload(sync):
    variant = sync.selected_variant
    return {
        'parent': ParentProductSerializer(sync.parent).data,
        'variants': ProductVariantSerializer(sync.variants, many=True).data,
        'attributes': VariantNavigationService.get_navigation_data(sync.variants, variant),
        'show_selector': VariantNavigationService.should_show_selector(sync.variants, sync.attribute_index),
        'selected_variant': ProductVariantSerializer(variant).data,
        'price_display': format_price_clp(variant.price),
        'main_image': sync.display.main_image,
        'is_zoomed': sync.display.is_zoomed,
        'location': sync.location.urlencode(),
        'location_changed': sync.location.writes > 0,
        'whatsapp_url': build_whatsapp_url(sync.parent, variant),
    }


class ParentProductViewSet(viewsets.ModelViewSet):
    """
    API endpoint for parent products.

    list: Products grouped by category; ?search= for a flat search,
          ?category= for one category page
    retrieve: Product page with variants, attribute selectors and the
              variant chosen from ?variantId=
    select: Change one attribute of the current variant
    create/update/delete: Admin only
    """
    queryset = ParentProduct.objects.all()
    serializer_class = ParentProductSerializer
    permission_classes = [IsStoreAdminOrReadOnly]
    lookup_value_regex = r'\d+'

    @property
    def client(self):
        return get_catalog_client()

    def list(self, request, *args, **kwargs):
        items = build_display_products(self.client)

        query = request.query_params.get('search', '')
        results = search_products(items, query)
        if results is not None:
            return Response({
                'mode': 'search',
                'query': query,
                'results': DisplayProductSerializer(results, many=True).data,
            })

        slug = request.query_params.get('category')
        if slug:
            category = category_info(slug) or {
                'key': slug, 'name': 'Categoría no encontrada', 'emoji': '❓'
            }
            return Response({
                'mode': 'category',
                'category': category,
                'results': DisplayProductSerializer(filter_by_category(items, slug), many=True).data,
            })

        groups = group_by_category(items)
        return Response({
            'mode': 'grouped',
            'categories': [
                {
                    **(category_info(key) or {'key': key, 'name': key, 'emoji': ''}),
                    'products': DisplayProductSerializer(bucket, many=True).data,
                }
                for key, bucket in groups.items()
            ],
        })

    def retrieve(self, request, *args, **kwargs):
        sync = VariantSelectionSynchronizer(self.client, _location_from_request(request))
        sync.load(kwargs[self.lookup_field])
        return Response(_selection_payload(sync))

    @action(detail=True, methods=['get'])
    def select(self, request, pk=None):
        """
        Resolve an attribute change.

        Query params:
        - variantId: Current variant
        - axis: Attribute being changed (e.g., color)
        - value: Normalized value chosen for it
        """
        serializer = AttributeSelectionSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)

        sync = VariantSelectionSynchronizer(self.client, _location_from_request(request))
        sync.load(pk)
        result = sync.select_attribute(
            serializer.validated_data['axis'],
            serializer.validated_data['value'],
        )

        payload = _selection_payload(sync)
        payload['matched'] = result.matched
        payload['requested_attributes'] = result.attributes
        return Response(payload)

    def perform_create(self, serializer):
        serializer.instance = self.client.create_parent(**serializer.validated_data)

    def perform_update(self, serializer):
        serializer.instance = self.client.update_parent(serializer.instance.pk, **serializer.validated_data)

    def perform_destroy(self, instance):
        self.client.delete_parent(instance.pk)


class ProductVariantViewSet(viewsets.ModelViewSet):
    """
    API endpoint for variants.

    Supports filtering by parent, attribute, price range and stock status.
    """
    queryset = ProductVariant.objects.select_related('parent')
    serializer_class = ProductVariantSerializer
    permission_classes = [IsStoreAdminOrReadOnly]
    filterset_class = VariantFilter
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['variant_name', 'parent__name']
    ordering_fields = ['variant_name', 'price', 'stock', 'created_at']
    ordering = ['variant_name']
    lookup_value_regex = r'\d+'

    @property
    def client(self):
        return get_catalog_client()

    def perform_create(self, serializer):
        data = dict(serializer.validated_data)
        parent = data.pop('parent')
        serializer.instance = self.client.create_variant(parent.pk, **data)

    def perform_update(self, serializer):
        variant = serializer.instance
        serializer.instance = self.client.update_variant(
            variant.parent_id, variant.pk, **serializer.validated_data
        )

    def perform_destroy(self, instance):
        self.client.delete_variant(instance.parent_id, instance.pk)


class CategoryListView(APIView):
    """Storefront categories in display order."""
    permission_classes = [AllowAny]

    def get(self, request):
        return Response(serialize_categories())


class ImageUploadView(APIView):
    """
    Admin image storage.

    post: Upload one or more files sent as ``images``; all or nothing
    delete: Best-effort delete of ``urls``
    """
    permission_classes = [IsStoreAdmin]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def post(self, request):
        files = request.FILES.getlist('images')
        if not files:
            return Response(
                {'detail': 'No se enviaron imágenes'},
                status=status.HTTP_400_BAD_REQUEST
            )
        urls = upload_files(files)
        return Response({'uploaded': len(urls), 'urls': urls}, status=status.HTTP_201_CREATED)

    def delete(self, request):
        serializer = ImageDeleteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        deleted = delete_files(serializer.validated_data['urls'])
        return Response({'deleted': deleted})
