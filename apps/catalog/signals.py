"""
Django signals for the catalog app.
Removes image files that no variant references anymore.
"""

import logging

from django.db import transaction
from django.db.models.signals import post_delete, pre_save
from django.dispatch import receiver

from .models import ProductVariant
from .services.storage import delete_files

logger = logging.getLogger(__name__)


def delete_unreferenced_images(urls):
    """
    Delete the files of ``urls`` that no variant lists anymore.
    Runs after commit, so the check sees the saved state.
    """
    referenced = set()
    for images in ProductVariant.objects.values_list('images', flat=True):
        referenced.update(images or [])

    unused = [url for url in dict.fromkeys(urls) if url not in referenced]
    shared = len(set(urls)) - len(unused)
    if shared:
        logger.info('Keeping %s image(s) still used by other variants', shared)
    if unused:
        delete_files(unused)


@receiver(pre_save, sender=ProductVariant)
def delete_removed_images(sender, instance, **kwargs):
    """
    Delete the files of images dropped from a variant's image list,
    once the save is committed.
    """
    if not instance.pk:
        return

    try:
        old_instance = ProductVariant.objects.get(pk=instance.pk)
    except ProductVariant.DoesNotExist:
        return

    removed = [url for url in old_instance.images or [] if url not in (instance.images or [])]
    if removed:
        transaction.on_commit(lambda: delete_unreferenced_images(removed))


@receiver(post_delete, sender=ProductVariant)
def delete_variant_images(sender, instance, **kwargs):
    images = list(instance.images or [])
    if images:
        transaction.on_commit(lambda: delete_unreferenced_images(images))
