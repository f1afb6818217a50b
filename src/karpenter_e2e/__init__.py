import warnings

# boto3 warns about interpreter deprecations on import; the warning clutters
# test output without being actionable from inside a suite.
warnings.filterwarnings("ignore", category=DeprecationWarning, module="botocore")
warnings.filterwarnings("ignore", category=DeprecationWarning, module="boto3")
