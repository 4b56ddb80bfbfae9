"""
Basic Usage Example for rawaccel_libinput

This script walks through the conversion:
1. Pick synchronous parameters
2. Sample the curve densely
3. Resample it into a libinput function
4. Compare the two reconstructions visually
"""

import matplotlib.pyplot as plt
import numpy as np
from rawaccel_libinput import AccelParams, CurveEngine, libinput_command, xorg_config


def main():
    print("=" * 60)
    print("rawaccel_libinput Basic Usage Example")
    print("=" * 60)

    # Step 1: Parameters
    print("\n[1] Creating parameters...")
    params = AccelParams(sync_speed=5.0, motivity=2.0, gamma=1.2, smooth=0.4).validate()
    print(f"    {params}")

    # Step 2: Dense curve
    print("\n[2] Sampling the curve...")
    engine = CurveEngine(params)
    series = engine.get_curve_series()
    print(f"    {len(series)} samples from {series.input[0]:.1f} to {series.max_input:.1f} counts/ms")
    print(f"    Sensitivity range: {np.min(series.sensitivity):.3f} - {np.max(series.sensitivity):.3f}")

    # Step 3: libinput function
    print("\n[3] Resampling for libinput...")
    neighbor = engine.get_libinput_table(25)
    bracketing = engine.get_libinput_table(25, method="bracketing")
    diff = np.max(np.abs(neighbor.values - bracketing.values))
    print(f"    Step: {neighbor.step:.3f}")
    print(f"    Max difference between reconstructions: {diff:.4f} counts/ms")
    print("\n" + libinput_command(neighbor))
    print("\n" + xorg_config(neighbor))

    # Step 4: Visualize
    print("\n[4] Creating visualization...")
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(series.input, series.output, '-', label='Curve', linewidth=2)
    ax.plot(neighbor.value_inputs, neighbor.values, 'o', label='libinput (neighbor)')
    ax.plot(bracketing.value_inputs, bracketing.values, 'x', label='libinput (bracketing)')
    ax.set_xlim(0, neighbor.value_inputs[-1])
    ax.set_xlabel('Input Speed (counts/ms)')
    ax.set_ylabel('Output Speed (counts/ms)')
    ax.legend()
    ax.grid(alpha=0.3)

    plt.tight_layout()
    plt.savefig('rawaccel_basic_example.png', dpi=150)
    print("    Saved to: rawaccel_basic_example.png")


if __name__ == "__main__":
    main()
