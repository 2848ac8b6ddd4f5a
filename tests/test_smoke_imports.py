"""
Smoke tests to verify basic imports and functionality.
"""


def test_import_amortlab():
    """Test that we can import the main package."""
    import amortlab

    assert hasattr(amortlab, "__version__")
    assert amortlab.__version__ == "0.1.0"


def test_public_api():
    from amortlab import DEFAULT_PARAMETERS, compute, loan_summary

    result = compute(DEFAULT_PARAMETERS)
    summary = loan_summary(DEFAULT_PARAMETERS)

    assert round(result.monthly_payment, 2) == 1266.71
    assert round(summary.monthly_payment, 2) == 1266.71


def test_all_exports_resolve():
    import amortlab

    for name in amortlab.__all__:
        assert hasattr(amortlab, name), name
