"""Numeric helpers, approximate entropy and segment storage for time series."""