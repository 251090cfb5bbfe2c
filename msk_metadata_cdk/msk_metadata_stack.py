from aws_cdk import (
    Stack,
    CfnOutput
)
from constructs import Construct

from msk_metadata_cdk.config import MskMetadataStackConfig
from msk_metadata_cdk.constructs.kafka_metadata import KafkaMetadata


class MskMetadataStack(Stack):

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        config: MskMetadataStackConfig,
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        kafka_metadata = KafkaMetadata(self, "Msk", config.kafka_metadata)

        # Outputs
        CfnOutput(
            self, "BootstrapServers",
            value=kafka_metadata.bootstrap_servers,
            description="Plaintext bootstrap broker string of the MSK cluster"
        )

        CfnOutput(
            self, "BootstrapServersTls",
            value=kafka_metadata.bootstrap_servers_tls,
            description="TLS bootstrap broker string of the MSK cluster"
        )

        CfnOutput(
            self, "BootstrapServersIam",
            value=kafka_metadata.bootstrap_servers_iam,
            description="IAM bootstrap broker string of the MSK cluster"
        )

        CfnOutput(
            self, "KafkaVersion",
            value=kafka_metadata.kafka_version,
            description="Apache Kafka version running on the MSK cluster"
        )

        CfnOutput(
            self, "Subnets",
            value=kafka_metadata.subnets,
            description="Client subnets of the MSK broker nodes"
        )

        CfnOutput(
            self, "SecurityGroups",
            value=kafka_metadata.security_groups,
            description="Security groups of the MSK broker nodes"
        )

        self._kafka_metadata = kafka_metadata

    @property
    def kafka_metadata(self) -> KafkaMetadata:
        """Get the cluster metadata construct"""
        return self._kafka_metadata
