"""Configuration management for MSK metadata CDK infrastructure"""
from dataclasses import dataclass

from constructs import Construct


@dataclass
class KafkaMetadataConfig:
    """Cluster metadata custom resource configuration"""
    cluster_arn: str
    function_timeout_seconds: int = 60
    function_memory_mib: int = 128
    log_level: str = "INFO"


@dataclass
class MskMetadataStackConfig:
    """Main configuration for the MSK metadata stack"""
    kafka_metadata: KafkaMetadataConfig

    @classmethod
    def from_context(cls, scope: Construct) -> "MskMetadataStackConfig":
        """Create configuration from the `clusterArn` CDK context value"""
        cluster_arn = scope.node.try_get_context("clusterArn")
        if not cluster_arn:
            raise ValueError(
                "Missing CDK context value 'clusterArn' "
                "(pass it with `cdk synth -c clusterArn=<arn>`)"
            )

        return cls(
            kafka_metadata=KafkaMetadataConfig(cluster_arn=cluster_arn)
        )
