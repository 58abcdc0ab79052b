"""Game model of a brick-breaking arcade game: geometry, balls, paddles, bricks, level files, scoring, input queues, font layout and a software framebuffer."""

__version__ = "0.1.0"