"""Basic chromaramp usage examples.

Run directly with:
    python examples/basic_usage.py

Saves a few preview strips as PNG files (needs the ``examples`` extra).
"""
from PIL import Image

from chromaramp import (
    Color,
    ColorSpace,
    FormatType,
    Gradient,
    InterpolationFunction,
    InterpolationMode,
    Spread,
    Stop,
)

STRIP_SIZE = (512, 48)


def save_strip(gradient: Gradient, path: str) -> None:
    width, height = STRIP_SIZE
    row = gradient.render_array(width, format_type=FormatType.INT).astype('uint8')
    arr = row[None, :, :].repeat(height, axis=0)
    Image.fromarray(arr, 'RGBA').save(path)
    print(f"Saved {path}")


def demonstrate_colors() -> None:
    accent = Color.from_hex('#ff8040')
    print("Accent as unit floats:", accent.rgba)
    print("Accent in HSV:", accent.components(ColorSpace.HSV))
    print("Back from HSL:", Color.from_hsl(*accent.components('hsl')).to_hex())


def demonstrate_gradients() -> None:
    # Default black -> white ramp
    gray = Gradient()
    print("Gray at 0.5:", gray.at(0.5).to_rgb())

    # Weighted stops: the red/yellow midpoint is pulled towards red
    sunset = Gradient([
        Stop(0.0, Color.from_hex('#ff0000'), weight=0.2),
        Stop(0.6, Color.from_hex('#ffd000')),
        Stop(1.0, Color.from_hex('#4000ff')),
    ])
    save_strip(sunset, 'sunset_linear.png')

    sunset.set_interpolation_mode(InterpolationFunction.CUBIC)
    save_strip(sunset, 'sunset_cubic.png')

    # Hue wheel in HSV takes the short way round: red -> magenta -> blue
    wheel = Gradient.from_colors(
        Color.from_hex('#ff0000'),
        Color.from_hex('#0000ff'),
        mode=InterpolationMode.create('linear', 'hsv'),
    )
    save_strip(wheel, 'hue_short_arc.png')

    # Copies are cheap and independent
    bands = wheel.copy()
    bands.set_interpolation_mode('discrete')
    bands.set_spread(Spread.REFLECT)
    print("Copy shares data after edits:", bands.shares_data_with(wheel))
    print("Reflected sample at 1.25:", bands.at(1.25).to_hex())


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_gradients()
