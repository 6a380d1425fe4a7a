"""jsonesc test suite.

Layout
- unit/        : one module at a time; clipboards are in-memory fakes.
- functional/  : the CLI driven through Click's CliRunner, as a user would.
- e2e/         : whole CLI runs that exercise logging configuration and the
                 flight recorder file.
- fakes.py     : shared test doubles (no tests here).

Every test gets the marker named after its top-level folder. Hypothesis
round-trip checks also carry @pytest.mark.property.
"""
