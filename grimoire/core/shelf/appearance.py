"""
Deterministic per-book decoration parameters.

Every value is derived from a digest of the book id, so any id format
(timestamps, uuids, titles) yields stable, well-spread styles.
"""
import hashlib
import random
from typing import Hashable, List, Union

from .models import Particle, SpineStyle


def _id_seed(book_id: Hashable) -> int:
    digest = hashlib.md5(str(book_id).encode("utf-8")).hexdigest()
    return int(digest[:16], 16)


def spine_style(book_id: Hashable) -> SpineStyle:
    """
    Get the spine style for a book.
    
    Args:
        book_id: Identifier of the book
        
    Returns:
        The same SpineStyle for the same id on every call
    """
    seed = _id_seed(book_id)
    return SpineStyle(
        height=240 + (seed % 5) * 12,
        tilt=(seed // 5) % 4 - 1.5,
        float_duration=3.0 + ((seed // 20) % 4) * 0.5,
        float_delay=round(((seed // 80) % 5) * 0.3, 2),
        float_distance=6 + ((seed // 400) % 3) * 2,
        glow_intensity=round(0.15 + ((seed // 1200) % 3) * 0.05, 2),
    )


def scatter_particles(count: int, seed: Union[int, str]) -> List[Particle]:
    """
    Place decorative particles reproducibly.
    
    Args:
        count: Number of particles
        seed: Seed for the generator; equal seeds give equal layouts
    """
    rng = random.Random(seed)
    particles = []
    for _ in range(count):
        particles.append(Particle(
            left=rng.uniform(0, 100),
            top=rng.uniform(0, 100),
            size=rng.uniform(2, 5),
            delay=rng.uniform(0, 3),
            duration=rng.uniform(2, 4),
        ))
    return particles
