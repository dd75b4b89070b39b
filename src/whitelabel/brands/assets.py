"""Image asset encoding for brand icons, splash screens and logos."""

import base64
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from whitelabel.constants import ALLOWED_IMAGE_EXTS, MIME_TYPES
from whitelabel.exceptions import AssetError

# Limit for decompression bomb protection (100MP)
Image.MAX_IMAGE_PIXELS = 100_000_000


def encode_image_data_url(path: Path) -> str:
    """Read an image file and return it as a base64 data URL.

    Raster images are opened with Pillow first so a corrupt or mislabeled
    file is rejected before it is embedded. SVG files are embedded as-is.

    Args:
        path: Image file to embed.

    Returns:
        ``data:<mime>;base64,<payload>``

    Raises:
        AssetError: If the file is missing, unsupported or unreadable.
    """
    if not path.is_file():
        raise AssetError(f"Image not found: {path}")
    suffix = path.suffix.lower()
    if suffix not in ALLOWED_IMAGE_EXTS:
        raise AssetError(
            f"Unsupported file type: {suffix or '(none)'}",
            details=f"Allowed: {', '.join(sorted(ALLOWED_IMAGE_EXTS))}",
        )
    if suffix != ".svg":
        try:
            with Image.open(path) as img:
                img.verify()
        except UnidentifiedImageError as e:
            raise AssetError(f"Cannot decode image file: {path}") from e
        except Image.DecompressionBombError as e:
            raise AssetError(f"Image too large: {path}") from e
        except OSError as e:
            raise AssetError(f"Failed to read image: {path}", details=str(e)) from e
    try:
        content = path.read_bytes()
    except OSError as e:
        raise AssetError(f"Failed to read image: {path}", details=str(e)) from e
    encoded = base64.b64encode(content).decode("utf-8")
    return f"data:{MIME_TYPES[suffix]};base64,{encoded}"
