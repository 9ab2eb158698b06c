"""pajeknet.adapters: conversions to and from other graph libraries."""
