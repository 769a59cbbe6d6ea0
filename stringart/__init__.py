"""String-art image preparation: JPEG loading, frame fitting, printable colour separation and Radon transforms."""

__version__ = "0.1.0"