"""Base filter class using Pydantic BaseModel."""

import uuid
from abc import ABC, abstractmethod
from typing import Any, ClassVar

import numpy as np
from PIL import Image
from pydantic import BaseModel, ConfigDict, Field


def validate_image(image: np.ndarray, channels: tuple[int, ...] = (1, 3, 4)) -> None:
    """Validate image shape and dtype.

    Accepts (H, W) or (H, W, C) uint8 arrays with C in ``channels``.
    """
    if image.ndim == 2:
        if 1 not in channels:
            raise ValueError(f"Expected image (H, W, {'|'.join(map(str, channels))}), "
                             f"got shape {image.shape}")
    elif image.ndim != 3 or image.shape[2] not in channels:
        raise ValueError(f"Expected image (H, W, {'|'.join(map(str, channels))}), "
                         f"got shape {image.shape}")
    if image.dtype != np.uint8:
        raise ValueError(f"Expected uint8 dtype, got {image.dtype}")


class BaseFilter(BaseModel, ABC):
    """Base class for buffer filters.

    Parameters are pydantic fields, so they are validated on construction
    and serialized by :meth:`to_dict`. Subclasses are registered under an id
    with :func:`pixelblur.filters.registry.register_filter`, which
    :meth:`from_dict` resolves.
    """

    model_config = ConfigDict(extra='ignore')

    # Set by register_filter
    filter_type: ClassVar[str] = "base"
    name: ClassVar[str] = "Base Filter"
    description: ClassVar[str] = ""
    category: ClassVar[str] = "uncategorized"
    # Bump when parameters change incompatibly
    VERSION: ClassVar[int] = 1

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    enabled: bool = True

    @abstractmethod
    def apply(self, image: np.ndarray) -> np.ndarray:
        """Apply the filter to an image.

        The input is never modified.

        Args:
            image: uint8 numpy array, shape (height, width) or
                (height, width, channels)

        Returns:
            Filtered uint8 array, same shape and dtype
        """

    def apply_pil(self, image: Image.Image) -> Image.Image:
        """Apply the filter to a PIL image.

        The image is converted to RGBA first, the result is an RGBA image.
        """
        pixels = np.asarray(image.convert('RGBA'))
        return Image.fromarray(self.apply(pixels))

    @property
    def params(self) -> dict[str, Any]:
        """Algorithm parameters, without id and enabled flag."""
        return self.model_dump(exclude={'id', 'enabled'})

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {
            'id': self.id,
            'filterId': self.filter_type,
            'enabled': self.enabled,
            'version': self.VERSION,
            'params': self.params,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'BaseFilter':
        """Deserialize from the :meth:`to_dict` format.

        Raises:
            ValueError: If ``filterId`` is not registered.
        """
        from .registry import get_filter

        return get_filter(
            data.get('filterId', 'base'),
            id=data.get('id', str(uuid.uuid4())),
            enabled=data.get('enabled', True),
            **data.get('params', {}),
        )
