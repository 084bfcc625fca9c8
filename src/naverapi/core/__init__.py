"""Core building blocks shared by the naverapi clients: logging, configuration, errors and HTTP."""
