import numpy as np
from typing import Callable, Tuple, cast

from ..errors import ColorspaceMismatchError
from ..types.colorspace import Colorspace
from ..types.format_type import FormatType, max_non_hue
from ..types.color_types import ColorElement, ColorMode, base_mode, element_to_array

from .to_hsv import np_unit_rgb_to_hsv, unit_rgb_to_hsv
from .to_rgb import hsv_to_unit_rgb, np_hsv_to_unit_rgb
from .transfer import linear_to_srgb, np_linear_to_srgb, np_srgb_to_linear, srgb_to_linear

# Model conversions are only defined over encoded RGB
CONVERT_MODEL_SCALAR: dict[tuple[str, str], Callable[[float, float, float], Tuple[float, float, float]]] = {
    ("rgb", "hsv"): unit_rgb_to_hsv,
    ("hsv", "rgb"): hsv_to_unit_rgb,
}

CONVERT_MODEL_NUMPY: dict[tuple[str, str], Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    ("rgb", "hsv"): np_unit_rgb_to_hsv,
    ("hsv", "rgb"): np_hsv_to_unit_rgb,
}

TRANSFER_SCALAR: dict[tuple[Colorspace, Colorspace], Callable[[float], float]] = {
    (Colorspace.ENCODED, Colorspace.LINEAR): srgb_to_linear,
    (Colorspace.LINEAR, Colorspace.ENCODED): linear_to_srgb,
}

TRANSFER_NUMPY: dict[tuple[Colorspace, Colorspace], Callable[[np.ndarray], np.ndarray]] = {
    (Colorspace.ENCODED, Colorspace.LINEAR): np_srgb_to_linear,
    (Colorspace.LINEAR, Colorspace.ENCODED): np_linear_to_srgb,
}


def normalize(color: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    maxval = max_non_hue[fmt]

    if space == "rgb":
        return color / maxval

    if space == "hsv":
        h = color[..., 0]
        s = color[..., 1] / maxval
        v = color[..., 2] / maxval
        return np.stack([h, s, v], axis=-1)

    raise ValueError(f"Unknown space: {space}")


def scale(color: np.ndarray, space: str, fmt: FormatType) -> np.ndarray:
    maxval = max_non_hue[fmt]

    if space == "rgb":
        scaled = color * maxval
        return np.round(scaled).astype(int) if fmt == FormatType.INT else scaled

    if space == "hsv":
        h = color[..., 0]
        s = color[..., 1] * maxval
        v = color[..., 2] * maxval

        if fmt == FormatType.INT:
            return np.stack([np.round(h), np.round(s), np.round(v)], axis=-1).astype(int)

        return np.stack([h, s, v], axis=-1)

    raise ValueError(f"Unknown space: {space}")


def convert_alpha(alpha: np.ndarray | None, input_fmt: FormatType, output_fmt: FormatType) -> np.ndarray | None:
    if alpha is None:
        return None

    max_in = max_non_hue[input_fmt]
    max_out = max_non_hue[output_fmt]

    result = alpha / max_in * max_out
    return np.round(result).astype(int) if output_fmt == FormatType.INT else result


def check_colorspaces(
    from_space: str,
    to_space: str,
    from_colorspace: Colorspace,
    to_colorspace: Colorspace,
) -> None:
    """Raise if a request pairs the HSV model with linear channels.

    HSV is defined over encoded RGB only, so going between a linear RGB
    color and HSV has to pass through an explicit colorspace conversion.
    """
    fs, ts = base_mode(from_space), base_mode(to_space)
    if fs == "hsv" and from_colorspace is not Colorspace.ENCODED:
        raise ColorspaceMismatchError("HSV colors are always encoded; got a linear HSV source")
    if ts == "hsv" and to_colorspace is not Colorspace.ENCODED:
        raise ColorspaceMismatchError("HSV colors are always encoded; cannot produce linear HSV")
    if fs != ts and Colorspace.LINEAR in (from_colorspace, to_colorspace):
        raise ColorspaceMismatchError(
            f"{fs} -> {ts} is only defined for encoded colors; "
            "convert the linear color to the encoded colorspace first"
        )


def _apply_model(base: np.ndarray, key: tuple[str, str], vectorized: bool) -> np.ndarray:
    if vectorized:
        return CONVERT_MODEL_NUMPY[key](base[..., 0], base[..., 1], base[..., 2])
    return np.array(CONVERT_MODEL_SCALAR[key](*(float(c) for c in base)))


def _apply_transfer(base: np.ndarray, key: tuple[Colorspace, Colorspace], vectorized: bool) -> np.ndarray:
    if vectorized:
        return TRANSFER_NUMPY[key](base)
    return np.array([TRANSFER_SCALAR[key](float(c)) for c in base])


def _convert_core(
    color: np.ndarray,
    from_space: str,
    to_space: str,
    input_fmt: FormatType,
    output_fmt: FormatType,
    from_colorspace: Colorspace,
    to_colorspace: Colorspace,
    vectorized: bool,
) -> np.ndarray:
    check_colorspaces(from_space, to_space, from_colorspace, to_colorspace)

    has_alpha_in = from_space.endswith("a")
    has_alpha_out = to_space.endswith("a")

    if has_alpha_in:
        base = color[..., :3]
        alpha = color[..., 3]
    else:
        base = color
        alpha = None

    fs, ts = base_mode(from_space), base_mode(to_space)

    # normalize → convert → scale
    converted = normalize(base, fs, input_fmt)

    if fs != ts:
        converted = _apply_model(converted, (fs, ts), vectorized)
    elif from_colorspace is not to_colorspace:
        converted = _apply_transfer(converted, (from_colorspace, to_colorspace), vectorized)

    out = scale(converted, ts, output_fmt)

    # alpha output, never gamma encoded
    if has_alpha_out:
        new_alpha = convert_alpha(alpha, input_fmt, output_fmt)
        if new_alpha is None:
            # Default alpha value when no alpha in input
            default_alpha = max_non_hue[output_fmt]
            alpha_array = np.full(out.shape[:-1] + (1,), default_alpha)
            return np.concatenate([out, alpha_array], axis=-1)
        return np.concatenate([out, new_alpha[..., None]], axis=-1)

    return out


def convert(
    color: ColorElement,
    from_space: ColorMode,
    to_space: ColorMode,
    input_type: FormatType = FormatType.FLOAT,
    output_type: FormatType = FormatType.FLOAT,
    from_colorspace: Colorspace = Colorspace.ENCODED,
    to_colorspace: Colorspace | None = None,
) -> ColorElement:
    """
    Convert a single color between modes, channel formats and colorspaces.

    Args:
        color: Tuple of channels in ``from_space`` order
        from_space, to_space: "rgb", "rgba", "hsv" or "hsva"
        input_type, output_type: channel format of input and output
        from_colorspace: colorspace of the input channels
        to_colorspace: colorspace of the output channels, defaults to the input's

    Returns:
        Tuple of channels in ``to_space`` order
    """
    from_colorspace = Colorspace(from_colorspace)
    to_colorspace = from_colorspace if to_colorspace is None else Colorspace(to_colorspace)
    if (
        from_space.lower() == to_space.lower()
        and input_type == output_type
        and from_colorspace is to_colorspace
    ):
        return color  # No conversion needed
    result = _convert_core(
        element_to_array(color),
        from_space.lower(),
        to_space.lower(),
        FormatType(input_type),
        FormatType(output_type),
        from_colorspace,
        to_colorspace,
        vectorized=False,
    )
    return cast(ColorElement, tuple(result.tolist()))


def np_convert(
    color: np.ndarray,
    from_space: ColorMode,
    to_space: ColorMode,
    input_type: FormatType = FormatType.FLOAT,
    output_type: FormatType = FormatType.FLOAT,
    from_colorspace: Colorspace = Colorspace.ENCODED,
    to_colorspace: Colorspace | None = None,
) -> np.ndarray:
    """Vectorized :func:`convert` for arrays whose last axis holds the channels."""
    from_colorspace = Colorspace(from_colorspace)
    to_colorspace = from_colorspace if to_colorspace is None else Colorspace(to_colorspace)
    if (
        from_space.lower() == to_space.lower()
        and input_type == output_type
        and from_colorspace is to_colorspace
    ):
        return color  # No conversion needed
    return _convert_core(
        np.asarray(color, dtype=float),
        from_space.lower(),
        to_space.lower(),
        FormatType(input_type),
        FormatType(output_type),
        from_colorspace,
        to_colorspace,
        vectorized=True,
    )
