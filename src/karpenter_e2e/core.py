# Shared retry policy for every client built from one AWSConfig.
# usage: botocore.config.Config(retries=RETRY_CONFIG)
RETRY_CONFIG = {
    "max_attempts": 10,
    "mode": "standard",
}

# Timestream lives in fewer regions than the suites run in, so metrics are
# written to a fixed region unless METRICS_REGION overrides it.
METRICS_DEFAULT_REGION = "us-east-2"

# Tag the cluster's security groups and subnets carry for discovery
DISCOVERY_TAG = "karpenter.sh/discovery"
CLUSTER_TAG = "testing/cluster"

AMI_ALIAS = "al2023@latest"

# Deterministic IAM names created alongside each test cluster
NODE_ROLE_TEMPLATE = "KarpenterNodeRole-{cluster_name}"
NODE_INSTANCE_PROFILE_TEMPLATE = "KarpenterNodeInstanceProfile-{cluster_name}"

# Account hosting the ECR pull-through mirrors private clusters pull from
PRIVATE_ECR_ACCOUNT = "857221689048"
