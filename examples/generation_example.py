#!/usr/bin/env python
"""
Example: Rough Surface Generation

Demonstrates how to generate periodic self-affine rough surfaces by spectral
synthesis:
1. Effect of the fractal dimension D
2. Anisotropy and rotation of the anisotropy axes
3. The three uniform generators (Park-Miller, Bays-Durham, L'Ecuyer)

License: BSD-3-Clause
"""

import matplotlib.pyplot as plt

from fracsurf import generate_surface, save_stl


def plot_field(field, title, ax=None, cmap="RdYlBu_r"):
    """Helper function to plot a 2D field."""
    if ax is None:
        fig, ax = plt.subplots()
    im = ax.imshow(field, cmap=cmap, interpolation="bicubic")
    ax.set_title(title)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    return im


def main():
    # Parameters
    N = 256  # Grid size
    L = 0.1  # Domain size (m)
    sigma = 1e-3  # RMS height (m)
    seed = 42  # Random seed for reproducibility

    print("Generating rough surfaces...")
    print(f"  Grid size: {N}x{N}")
    print(f"  Domain size: {L} m, RMS height: {sigma} m")

    # --- Fractal dimension ---
    smooth = generate_surface(nx=N, ny=N, L=L, D=2.1, sigma=sigma, seed=seed, verbose=True)
    rough = generate_surface(nx=N, ny=N, L=L, D=2.7, sigma=sigma, seed=seed)

    # --- Anisotropy ---
    stretched = generate_surface(nx=N, ny=N, L=L, D=2.3, sigma=sigma, anisotropy=4.0, seed=seed)
    rotated = generate_surface(
        nx=N, ny=N, L=L, D=2.3, sigma=sigma, anisotropy=4.0, theta_deg=45, seed=seed
    )

    # --- Generators ---
    bays_durham = generate_surface(nx=N, ny=N, L=L, D=2.3, sigma=sigma, rng_kind="baysdurham", seed=seed)
    lecuyer = generate_surface(nx=N, ny=N, L=L, D=2.3, sigma=sigma, rng_kind="lecuyer", seed=seed)

    # --- Plotting ---
    fig, axes = plt.subplots(2, 3, figsize=(14, 9))

    im1 = plot_field(smooth.field, "D = 2.1", axes[0, 0])
    im2 = plot_field(rough.field, "D = 2.7", axes[0, 1])
    im3 = plot_field(stretched.field, "Anisotropy 4, θ = 0°", axes[0, 2])
    im4 = plot_field(rotated.field, "Anisotropy 4, θ = 45°", axes[1, 0])
    im5 = plot_field(bays_durham.field, "Bays-Durham, D = 2.3", axes[1, 1])
    im6 = plot_field(lecuyer.field, "L'Ecuyer, D = 2.3", axes[1, 2])

    # Add colorbars
    for ax, im in zip(axes.flat, [im1, im2, im3, im4, im5, im6]):
        fig.colorbar(im, ax=ax, orientation="horizontal", pad=0.05, shrink=0.8)

    plt.suptitle("Self-affine Rough Surfaces", fontsize=14, fontweight="bold")
    plt.tight_layout()
    plt.savefig("rough_surfaces.png", dpi=150)
    plt.show()

    # --- Mesh export ---
    path = save_stl("rough_surface.stl", rough.field, L, L)

    print("\nSurfaces generated successfully!")
    print("Figure saved as 'rough_surfaces.png'")
    print(f"Mesh saved as '{path}'")


if __name__ == "__main__":
    main()
