"""Custom resource construct for reading MSK cluster metadata"""
from pathlib import Path

from aws_cdk import (
    aws_iam as iam,
    aws_lambda as _lambda,
    aws_logs as logs,
    custom_resources as cr,
    CustomResource,
    Duration,
    RemovalPolicy,
    Token
)
from constructs import Construct

from msk_metadata_cdk.config import KafkaMetadataConfig
from msk_metadata_cdk.constructs.cfn_nag import CfnNagSuppression, add_cfn_nag_suppressions

HANDLER_ASSET_PATH = Path(__file__).resolve().parent.parent / "functions" / "kafka_metadata"

MSK_METADATA_ACTIONS = [
    "kafka:DescribeCluster",
    "kafka:GetBootstrapBrokers"
]


class KafkaMetadata(Construct):
    """
    Construct for looking up connection metadata of an existing MSK cluster.

    Provisions a Lambda-backed custom resource that, at deployment time,
    describes the cluster identified by `cluster_arn` and returns its
    bootstrap brokers, Kafka version and networking details as attributes
    other resources in the same template can reference.
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        config: KafkaMetadataConfig
    ) -> None:
        """
        Initialize the Kafka metadata construct.

        Args:
            scope: Parent construct
            construct_id: Unique identifier for this construct
            config: Custom resource configuration, including the cluster ARN

        Raises:
            ValueError: If the cluster ARN is an empty string
        """
        super().__init__(scope, construct_id)

        cluster_arn = config.cluster_arn
        if not Token.is_unresolved(cluster_arn) and not cluster_arn.strip():
            raise ValueError("cluster_arn must be a non-empty string")

        self._log_group = logs.LogGroup(
            self, "LogGroup",
            retention=logs.RetentionDays.ONE_WEEK,
            removal_policy=RemovalPolicy.DESTROY
        )

        self._role = self._create_role(self._log_group)

        self._function = self._create_function(config, self._role, self._log_group)

        provider = cr.Provider(
            self, "Provider",
            on_event_handler=self._function
        )

        self._custom_resource = CustomResource(
            self, "MskMetadata",
            service_token=provider.service_token,
            resource_type="Custom::KafkaMetadata",
            properties={
                "ClusterArn": cluster_arn
            }
        )

    def _create_role(self, log_group: logs.ILogGroup) -> iam.Role:
        """Create the execution role for the metadata function"""
        role = iam.Role(
            self, "Role",
            assumed_by=iam.ServicePrincipal("lambda.amazonaws.com"),
            inline_policies={
                "CloudWatchLogsPolicy": iam.PolicyDocument(
                    statements=[
                        iam.PolicyStatement(
                            actions=[
                                "logs:CreateLogStream",
                                "logs:PutLogEvents"
                            ],
                            resources=[log_group.log_group_arn]
                        )
                    ]
                ),
                "MskMetadataPolicy": iam.PolicyDocument(
                    statements=[
                        iam.PolicyStatement(
                            actions=MSK_METADATA_ACTIONS,
                            resources=["*"]
                        )
                    ]
                )
            }
        )

        add_cfn_nag_suppressions(role.node.default_child, [
            CfnNagSuppression(
                rule_id="W11",
                reason="MSK actions do not support resource level permissions"
            )
        ])

        return role

    def _create_function(
        self,
        config: KafkaMetadataConfig,
        role: iam.IRole,
        log_group: logs.ILogGroup
    ) -> _lambda.Function:
        """Create the Lambda function that answers custom resource events"""
        function = _lambda.Function(
            self, "Function",
            description="Reads connection metadata of an MSK cluster",
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler="index.on_event",
            code=_lambda.Code.from_asset(
                str(HANDLER_ASSET_PATH),
                exclude=["__pycache__", "*.pyc"]
            ),
            role=role,
            log_group=log_group,
            timeout=Duration.seconds(config.function_timeout_seconds),
            memory_size=config.function_memory_mib,
            environment={
                "LOG_LEVEL": config.log_level
            }
        )

        add_cfn_nag_suppressions(function.node.default_child, [
            CfnNagSuppression(
                rule_id="W89",
                reason="Function only calls the MSK control plane and does not need VPC access"
            ),
            CfnNagSuppression(
                rule_id="W92",
                reason="Function runs once per stack operation and does not need reserved concurrency"
            )
        ])

        return function

    @property
    def role(self) -> iam.Role:
        """Get the execution role of the metadata function"""
        return self._role

    @property
    def function(self) -> _lambda.Function:
        """Get the metadata function"""
        return self._function

    @property
    def custom_resource(self) -> CustomResource:
        """Get the custom resource"""
        return self._custom_resource

    @property
    def bootstrap_servers(self) -> str:
        """Plaintext bootstrap broker string"""
        return self._custom_resource.get_att_string("BootstrapServers")

    @property
    def bootstrap_servers_tls(self) -> str:
        """TLS bootstrap broker string"""
        return self._custom_resource.get_att_string("BootstrapServersTls")

    @property
    def bootstrap_servers_iam(self) -> str:
        """IAM (SASL) bootstrap broker string"""
        return self._custom_resource.get_att_string("BootstrapServersIam")

    @property
    def kafka_version(self) -> str:
        """Apache Kafka version of the cluster"""
        return self._custom_resource.get_att_string("KafkaVersion")

    @property
    def subnets(self) -> str:
        """Comma-separated client subnet ids of the broker nodes"""
        return self._custom_resource.get_att_string("Subnets")

    @property
    def security_groups(self) -> str:
        """Comma-separated security group ids of the broker nodes"""
        return self._custom_resource.get_att_string("SecurityGroups")
