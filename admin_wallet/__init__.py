"""Administrative gateway for a single custodial Stellar account."""

__version__ = "0.1.0"
