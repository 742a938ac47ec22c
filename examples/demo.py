#!/usr/bin/env python3
"""Quick start demo for the termwave renderer.

Renders the built-in envelopes with every charset, at standard and high
density.

Usage:
    python examples/demo.py
"""

from termwave import Density, WaveCharset, render
from termwave.wavetables import generate_sine, generate_triangle


def main():
    print("=" * 72)
    print(" termwave: Terminal Waveform Renderer")
    print("=" * 72)
    print()

    sine = generate_sine(64, periods=2)
    triangle = generate_triangle(64)

    for charset in WaveCharset:
        print("-" * 72)
        print(f" Sine ({charset.value}, standard density):")
        print("-" * 72)
        for line in render(4, sine, charset=charset):
            print(f"   {line}")
        print()

    print("-" * 72)
    print(" Charset comparison (triangle @ high density, 128 magnitudes):")
    print("-" * 72)
    print()

    wide = generate_triangle(128)
    for charset in WaveCharset:
        print(f" {charset.value}:")
        for line in render(4, wide, charset=charset, density=Density.HIGH):
            print(f"   {line}")
        print()

    print(" Unscaled triangle (1.0 = full height):")
    for line in render(3, triangle, scale=False):
        print(f"   {line}")
    print()

    print("=" * 72)
    print(" For your own data:")
    print("   termwave mags.txt --charset dots --hd")
    print("=" * 72)


if __name__ == "__main__":
    main()
