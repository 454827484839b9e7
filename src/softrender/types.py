import numpy as np
import numpy.typing as npt

COLOR = tuple[int, int, int]
PIXELS = npt.NDArray[np.uint8]
DEPTH = npt.NDArray[np.float64]
MAT3 = npt.NDArray[np.float64]
BBOX = tuple[int, int, int, int]
MASK = npt.NDArray[np.bool_]
