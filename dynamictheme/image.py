# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Image to pixel array adapter.

Decodes and shrinks an image into the flat packed-ARGB array the
quantizers expect. Pillow is only needed for file input.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any, Union

import numpy as np
from loguru import logger
from numpy.typing import NDArray

ImageInput = Union[str, Path, NDArray[np.uint8], Any]


def image_to_pixels(image: ImageInput, canvas_size: int = 128) -> NDArray[np.uint32]:
    """
    Decode an image into opaque packed ARGB pixels.

    Images larger than ``canvas_size`` on either side are resized to
    ``canvas_size`` x ``canvas_size`` with nearest-neighbour sampling, so
    pixel counts stay proportional to area. Pixels that are not fully
    opaque are dropped.

    Args:
        image: One of:
            - Path to an image file (str or Path). Embedded ICC profiles
              are converted to sRGB.
            - A PIL.Image.Image
            - NumPy array of shape (H, W, 3) or (H, W, 4) with uint8 values
        canvas_size: Maximum side length before quantization

    Returns:
        1-D uint32 array of opaque ARGB values

    Raises:
        ImportError: If Pillow is needed and not installed
        TypeError: If ``image`` is of an unsupported type
        ValueError: If an array has the wrong shape or dtype
    """
    if isinstance(image, (str, Path)):
        rgba = _load_file(image)
    elif isinstance(image, np.ndarray):
        rgba = _validate_array(image)
    elif _is_pil_image(image):
        rgba = np.array(image.convert("RGBA"), dtype=np.uint8)
    else:
        raise TypeError(
            f"Expected file path, PIL image or numpy array, got {type(image)}"
        )

    height, width = rgba.shape[:2]
    if height > canvas_size or width > canvas_size:
        rgba = _resize(rgba, canvas_size)
        logger.debug(f"Resized {width}x{height} image to {canvas_size}x{canvas_size}")

    rgba = rgba.reshape(-1, 4).astype(np.uint32)
    opaque = rgba[rgba[:, 3] == 255]
    return (
        np.uint32(0xFF000000)
        | (opaque[:, 0] << np.uint32(16))
        | (opaque[:, 1] << np.uint32(8))
        | opaque[:, 2]
    ).astype(np.uint32)


def _require_pil():
    try:
        from PIL import Image
    except ImportError as e:
        raise ImportError(
            "Pillow is required for image loading. "
            "Install with: pip install Pillow"
        ) from e
    return Image


def _is_pil_image(image: Any) -> bool:
    try:
        from PIL import Image
    except ImportError:
        return False
    return isinstance(image, Image.Image)


def _load_file(path: Union[str, Path]) -> NDArray[np.uint8]:
    """Load an image file as an (H, W, 4) sRGB array."""
    Image = _require_pil()
    img = Image.open(path)

    if "icc_profile" in img.info:
        from PIL import ImageCms

        alpha = img.getchannel("A") if "A" in img.getbands() else None
        try:
            embedded_profile = ImageCms.ImageCmsProfile(io.BytesIO(img.info["icc_profile"]))
            srgb_profile = ImageCms.createProfile("sRGB")
            img = ImageCms.profileToProfile(img.convert("RGB"), embedded_profile, srgb_profile)
        except (OSError, ImageCms.PyCMSError) as e:
            logger.warning(f"Ignoring unusable ICC profile in {path}: {e}")
        img = img.convert("RGBA")
        if alpha is not None:
            img.putalpha(alpha)
    else:
        img = img.convert("RGBA")

    return np.array(img, dtype=np.uint8)


def _validate_array(pixels: NDArray) -> NDArray[np.uint8]:
    if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
        raise ValueError(
            f"Expected (H, W, 3) or (H, W, 4) array, got shape {pixels.shape}"
        )
    if pixels.dtype != np.uint8:
        raise ValueError(f"Expected uint8 array, got {pixels.dtype}")
    if pixels.shape[2] == 3:
        alpha = np.full(pixels.shape[:2] + (1,), 255, dtype=np.uint8)
        pixels = np.concatenate([pixels, alpha], axis=2)
    return pixels


def _resize(rgba: NDArray[np.uint8], canvas_size: int) -> NDArray[np.uint8]:
    Image = _require_pil()
    img = Image.fromarray(rgba)
    img = img.resize((canvas_size, canvas_size), Image.Resampling.NEAREST)
    return np.array(img, dtype=np.uint8)
