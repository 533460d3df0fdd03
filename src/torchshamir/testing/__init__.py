"""Testing utilities for torchshamir.

Example usage:

    import hypothesis

    from torchshamir.testing.strategies import thresholds_and_counts

    @hypothesis.given(thresholds_and_counts())
    def test_split(params):
        k, n = params
        ...
"""
