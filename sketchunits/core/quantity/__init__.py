from sketchunits.core.quantity.area import Area
from sketchunits.core.quantity.volume import Volume

__all__ = ["Area", "Volume"]
