from enum import Enum
from typing import NamedTuple, Tuple
import numpy as np

HUE_360 = 360.0


class FormatType(str, Enum):
    """
    Storage format of the non-hue channels. Hue is in degrees for all of them.

    INT:        0..255
    FLOAT:      0..1
    """
    INT = "int"
    FLOAT = "float"


class FormatInfo(NamedTuple):
    scalar: type
    dtype: type
    accepts: Tuple[type, ...]
    channel_max: float


FORMAT_INFO = {
    FormatType.INT: FormatInfo(int, np.int64, (int, np.integer), 255),
    FormatType.FLOAT: FormatInfo(float, np.float64, (float, np.floating), 1.0),
}
