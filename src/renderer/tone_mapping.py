# renderer/tone_mapping.py
import numpy as np
from numba import njit, prange

def reinhard_tone_mapping(accumulated, exposure=1.0, white_point=1.0, gamma=2.2):
    """
    Apply Reinhard tone mapping to a linear radiance image.
    """
    scaled = np.nan_to_num(accumulated, nan=0.0, posinf=0.0, neginf=0.0) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = np.clip(mapped, 0.0, None) ** (1.0 / gamma)
    output = (mapped * 255).clip(0, 255).astype("uint8")
    return output

def to_rgb8(linear_image, gamma=2.0):
    """
    Clamp a linear radiance image to [0, 1], gamma-encode it and quantise
    to 8 bits. NaN samples are treated as black.
    """
    linear_image = np.ascontiguousarray(linear_image, dtype=np.float64)
    output_image = np.zeros(linear_image.shape, dtype=np.uint8)
    gamma_kernel(linear_image, output_image, 1.0 / gamma)
    return output_image

@njit(parallel=True)
def gamma_kernel(linear_image, output_image, inv_gamma):
    height, width, channels = linear_image.shape
    for y in prange(height):
        for x in range(width):
            for c in range(channels):
                value = linear_image[y, x, c]
                if value != value or value < 0.0:
                    value = 0.0
                elif value > 1.0:
                    value = 1.0
                # 255.999 keeps 1.0 at 255 after truncation
                output_image[y, x, c] = int(255.999 * value ** inv_gamma)
