"""
Find and draw the minimum-energy seam of an image.

Usage:
    python find_seam_demo.py --image photo.jpg --direction horizontal

Without --image a synthetic picture (dark background, bright disc) is used.
"""

import argparse
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import torch.nn.functional as F
import numpy as np
from PIL import Image
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from seamfinder import find_seam, seam_energy


def load_image(path: str, device='cpu'):
    """Load image and convert to torch tensor (C, H, W) in [0, 1]."""
    img = Image.open(path).convert('RGB')
    img_array = np.array(img, dtype=np.float32) / 255.0
    return torch.from_numpy(img_array).permute(2, 0, 1).to(device)


def make_disc_image(H: int = 120, W: int = 180, device='cpu'):
    """Dark background with a bright disc left of center."""
    ys = torch.arange(H, dtype=torch.float32, device=device).unsqueeze(1)
    xs = torch.arange(W, dtype=torch.float32, device=device).unsqueeze(0)
    disc = ((ys - H / 2) ** 2 + (xs - W / 3) ** 2 <= (H / 4) ** 2).float()
    return disc.unsqueeze(0).expand(3, H, W).clone()


def gradient_energy(image: torch.Tensor) -> torch.Tensor:
    """L1 Sobel gradient magnitude (Avidan & Shamir 2007), (C, H, W) -> (H, W)."""
    gray = (0.299 * image[0] + 0.587 * image[1] + 0.114 * image[2]).view(1, 1, *image.shape[1:])

    sobel_x = torch.tensor([[-1, 0, 1],
                            [-2, 0, 2],
                            [-1, 0, 1]], dtype=gray.dtype, device=gray.device).view(1, 1, 3, 3)
    sobel_y = sobel_x.transpose(2, 3)

    grad_x = F.conv2d(gray, sobel_x, padding=1)
    grad_y = F.conv2d(gray, sobel_y, padding=1)
    return (grad_x.abs() + grad_y.abs()).squeeze()


def plot_seam(image, energy, cumulative, seam, direction, path):
    """Save the image with its seam next to the cumulative energy table."""
    fig, axes = plt.subplots(1, 3, figsize=(18, 5))

    axes[0].imshow(image.permute(1, 2, 0).cpu().numpy())
    steps = np.arange(len(seam))
    if direction == 'vertical':
        axes[0].plot(seam.cpu().numpy(), steps, 'r-', linewidth=1.5)
    else:
        axes[0].plot(steps, seam.cpu().numpy(), 'r-', linewidth=1.5)
    axes[0].set_title(f"Minimum {direction} seam")

    axes[1].imshow(energy.cpu().numpy(), cmap='gray')
    axes[1].set_title("Energy")

    axes[2].imshow(cumulative.cpu().numpy(), cmap='magma')
    axes[2].set_title("Cumulative energy")

    for ax in axes:
        ax.axis('off')

    plt.tight_layout()
    os.makedirs(os.path.dirname(path) or '.', exist_ok=True)
    plt.savefig(path, dpi=150, bbox_inches='tight')
    plt.close()
    print(f"Saved: {path}")


def main():
    parser = argparse.ArgumentParser(description="Find the minimum-energy seam of an image")
    parser.add_argument(
        '--image', type=str,
        help='Input image (default: synthetic disc)'
    )
    parser.add_argument(
        '--direction', type=str, default='vertical', choices=['vertical', 'horizontal'],
        help='vertical = top to bottom, horizontal = left to right (default: vertical)'
    )
    parser.add_argument(
        '--output', type=str, default='../output/seam.png',
        help='Output figure path (default: ../output/seam.png)'
    )
    args = parser.parse_args()

    device = 'cuda' if torch.cuda.is_available() else 'cpu'
    print(f"Using device: {device}")

    if args.image:
        print(f"Loading {args.image}...")
        image = load_image(args.image, device=device)
    else:
        image = make_disc_image(device=device)
    C, H, W = image.shape
    print(f"Image shape: {C} x {H} x {W}")

    print("Computing energy...")
    energy = gradient_energy(image)

    print(f"Computing {args.direction} seam...")
    seam, cumulative, _ = find_seam(energy, direction=args.direction)
    print(f"  Seam length: {len(seam)}, total energy: "
          f"{seam_energy(energy, seam, direction=args.direction):.3f}")

    plot_seam(image, energy, cumulative, seam, args.direction, args.output)


if __name__ == '__main__':
    main()
