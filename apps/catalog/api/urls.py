from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import (
    CategoryListView,
    ImageUploadView,
    ParentProductViewSet,
    ProductVariantViewSet,
)

router = DefaultRouter()
router.register(r'parents', ParentProductViewSet, basename='parent')
router.register(r'variants', ProductVariantViewSet, basename='variant')

urlpatterns = [
    path('categories/', CategoryListView.as_view(), name='category-list'),
    path('uploads/', ImageUploadView.as_view(), name='image-upload'),
    path('', include(router.urls)),
]
