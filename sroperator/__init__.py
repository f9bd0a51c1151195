"""Special resource models, node caching, state templates, node labelling and status conditions."""

__version__ = "0.1.0"