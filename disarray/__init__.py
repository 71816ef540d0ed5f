"""Game toolkit: XML, RM2 models, vectors, colours, bitmap-font text and UDP messaging."""

__version__ = "0.1.0"