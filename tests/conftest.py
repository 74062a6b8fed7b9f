from docquery.testing import docquery_test_config  # noqa: F401
