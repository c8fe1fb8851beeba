"""
Image services for testimonies.
Page-based image association and gallery resolution.
"""

from .image_catalog import ImageCatalog, ParsedImageFilename, parse_image_filename
from .gallery_resolver import GalleryResolver, generate_avatar_url

__all__ = [
    'ImageCatalog',
    'ParsedImageFilename',
    'parse_image_filename',
    'GalleryResolver',
    'generate_avatar_url',
]
