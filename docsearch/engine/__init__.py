"""Search engine: index store and matcher/ranker."""
