"""Save dithered frames as images with Pillow."""

import os

import numpy as np


def frame_to_image(pixels, scale=1):
    """Convert a bool buffer to a black/white Pillow image, upscaled by `scale`."""
    from PIL import Image

    data = np.where(np.asarray(pixels, dtype=bool), 255, 0).astype(np.uint8)
    img = Image.fromarray(data)  # uint8 2-D -> mode "L"
    if scale > 1:
        img = img.resize((img.width * scale, img.height * scale), Image.Resampling.NEAREST)
    return img


def frames_to_gif(frames, gif_path, scale=4, duration_ms=16):
    """Assemble dithered frames into a looping animated GIF."""
    images = [frame_to_image(frame.pixels, scale) for frame in frames]
    if not images:
        print("No frames to save!")
        return False

    images[0].save(
        gif_path,
        save_all=True,
        append_images=images[1:],
        duration=duration_ms,
        loop=0,
    )
    size_kb = os.path.getsize(gif_path) / 1024
    print(f"Saved {gif_path} ({size_kb:.1f} KB, {len(images)} frames)")
    return True
