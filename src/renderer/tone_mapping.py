# renderer/tone_mapping.py
import numpy as np
from numba import njit, prange

@njit(parallel=True, cache=False)
def _gamma_kernel(linear_image, output_image, inv_gamma):
    height, width = linear_image.shape[0], linear_image.shape[1]
    for y in prange(height):
        for x in range(width):
            for c in range(3):
                value = linear_image[y, x, c]
                # Negative and NaN samples map to black.
                if not value > 0.0:
                    value = 0.0
                value = value ** inv_gamma
                if value > 1.0:
                    value = 1.0
                output_image[y, x, c] = int(value * 255.999)

def gamma_to_8bit(linear, gamma: float = 2.0) -> np.ndarray:
    """
    Gamma-encode a (height, width, 3) linear image, clamp to [0, 1] and
    quantize to uint8.
    """
    linear = np.ascontiguousarray(linear, dtype=np.float64)
    output = np.empty(linear.shape, dtype=np.uint8)
    _gamma_kernel(linear, output, 1.0 / gamma)
    return output

def reinhard_tone_mapping(accumulated, exposure=1.0, white_point=1.0, gamma=2.2):
    """
    Apply Reinhard tone mapping to a linear radiance image.
    """
    scaled = np.maximum(np.asarray(accumulated, dtype=np.float64), 0.0) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    output = (mapped * 255.999).clip(0, 255).astype("uint8")
    return output

def auto_exposure_tone_mapping(accumulated, gamma=2.2, target_midgray=0.18):
    """
    Compute an exposure value based on the average scene luminance and then
    apply Reinhard tone mapping.
    """
    accumulated = np.asarray(accumulated, dtype=np.float64)
    # Compute per-pixel luminance using standard coefficients.
    luminance = 0.2126 * accumulated[:,:,0] + 0.7152 * accumulated[:,:,1] + 0.0722 * accumulated[:,:,2]
    avg_lum = luminance.mean() + 1e-5  # keeps an all-black image finite
    exposure = target_midgray / avg_lum
    return reinhard_tone_mapping(accumulated, exposure=exposure, white_point=1.0, gamma=gamma)
