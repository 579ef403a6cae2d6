"""Registry of the marketplace's bounded contexts, keyed by name."""

DOMAIN_NAMES = ("directory", "reviews", "tips")


def get_domain(name, init=True):
    """Import a domain by name, initializing it unless told otherwise."""
    if name == "directory":
        from directory.domain import directory as domain
    elif name == "reviews":
        from reviews.domain import reviews as domain
    elif name == "tips":
        from tips.domain import tips as domain
    else:
        raise ValueError(f"Unknown domain: {name}")

    if init:
        domain.init()
    return domain
