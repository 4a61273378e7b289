"""
Product image storage: validated uploads and best-effort deletes.
"""

import io
import logging
import os
import re
import secrets
import time
from concurrent.futures import ThreadPoolExecutor
from urllib.parse import unquote, urlparse

from django.conf import settings
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage
from django.utils.text import get_valid_filename
from imagekit.processors import ResizeToFit
from PIL import Image, UnidentifiedImageError

from apps.catalog.exceptions import ImageValidationError, UploadError

logger = logging.getLogger(__name__)

UPLOAD_DIR = 'products'
MAX_IMAGE_SIZE = (1200, 1200)
JPEG_QUALITY = 85


def validate_image(uploaded_file):
    """Type and size checks, done before anything is sent to storage."""
    content_type = getattr(uploaded_file, 'content_type', None) or ''
    if not content_type.startswith('image/'):
        raise ImageValidationError('Solo se permiten archivos de imagen')

    max_bytes = settings.STOREFRONT_MAX_UPLOAD_BYTES
    if uploaded_file.size > max_bytes:
        raise ImageValidationError(
            f'El archivo es demasiado grande. Máximo {max_bytes // (1024 * 1024)}MB.'
        )


def _process_image(uploaded_file):
    uploaded_file.seek(0)
    try:
        img = Image.open(uploaded_file)
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        raise ImageValidationError('El archivo no es una imagen válida.') from e

    img = ResizeToFit(*MAX_IMAGE_SIZE, upscale=False).process(img)
    if img.mode != 'RGB':
        img = img.convert('RGB')

    buffer = io.BytesIO()
    img.save(buffer, format='JPEG', quality=JPEG_QUALITY)
    return buffer.getvalue()


def _upload_name(original_name):
    stem = os.path.splitext(os.path.basename(original_name or ''))[0]
    stem = get_valid_filename(stem) if re.search(r'\w', stem) else 'imagen'
    return f'{UPLOAD_DIR}/{int(time.time() * 1000)}_{secrets.token_hex(6)}_{stem}.jpg'


def upload_file(uploaded_file, storage=None):
    """
    Store one product image and return its public URL.

    The image is resized to fit 1200x1200 and saved as JPEG.
    """
    storage = storage or default_storage
    validate_image(uploaded_file)
    content = _process_image(uploaded_file)

    name = _upload_name(getattr(uploaded_file, 'name', None))
    logger.info('Uploading image %s to %s', getattr(uploaded_file, 'name', '?'), name)
    try:
        saved_name = storage.save(name, ContentFile(content))
        url = storage.url(saved_name)
    except OSError as e:
        logger.exception('Error uploading image %s', name)
        raise UploadError() from e

    logger.info('Image uploaded: %s', url)
    return url


def upload_files(files, storage=None):
    """
    Upload a batch of images concurrently.

    URLs come back in the order of ``files`` once every upload finished.
    Any failure aborts the whole batch.
    """
    files = list(files)
    if not files:
        return []

    for uploaded_file in files:
        validate_image(uploaded_file)

    with ThreadPoolExecutor(max_workers=len(files)) as executor:
        futures = [executor.submit(upload_file, f, storage) for f in files]
        try:
            return [future.result() for future in futures]
        except UploadError:
            logger.error('Image batch of %s files aborted', len(files))
            raise


def _storage_path(url, storage):
    """
    Storage name for ``url``, or None when the URL does not point into
    ``storage`` (another host, or outside its base URL).
    """
    base = urlparse(getattr(storage, 'base_url', None) or settings.MEDIA_URL)
    parsed = urlparse(url)
    if parsed.netloc and parsed.netloc != base.netloc:
        return None
    base_path = base.path or '/'
    if not parsed.path.startswith(base_path):
        return None
    return unquote(parsed.path[len(base_path):]).lstrip('/') or None


def delete_file(url, storage=None):
    """
    Best-effort delete of a stored image. Failures are logged and never
    raised, so removing an image from a product is never blocked.
    """
    storage = storage or default_storage
    try:
        path = _storage_path(url, storage)
        if path is None:
            logger.warning('Image is not in managed storage, skipping: %s', url)
            return False
        if not storage.exists(path):
            logger.warning('Image not found in storage: %s', url)
            return False
        storage.delete(path)
    except Exception as e:
        logger.warning('Error deleting image %s: %s', url, e)
        return False

    logger.info('Image deleted: %s', path)
    return True


def delete_files(urls, storage=None):
    """Best-effort bulk delete. Returns how many files were removed."""
    return sum(1 for url in urls or [] if delete_file(url, storage))
