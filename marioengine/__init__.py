"""Building blocks for a 2D side-scrolling game: geometry, bounding areas, colours, animations, animators, films, motion and a game loop."""

__version__ = "0.1.0"