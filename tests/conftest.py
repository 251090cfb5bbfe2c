"""Pytest configuration and shared fixtures for CDK tests"""
import pytest
import aws_cdk as core
import aws_cdk.assertions as assertions
from msk_metadata_cdk.config import KafkaMetadataConfig, MskMetadataStackConfig
from msk_metadata_cdk.constructs.kafka_metadata import KafkaMetadata
from msk_metadata_cdk.msk_metadata_stack import MskMetadataStack
from tests.test_constants import InfraConfig, SNAPSHOT_DIR
from tests.test_helpers import assert_matches_snapshot


def pytest_addoption(parser):
    parser.addoption(
        "--snapshot-update",
        action="store_true",
        default=False,
        help="Rewrite recorded template snapshots instead of comparing against them"
    )


@pytest.fixture(scope="module")
def cdk_app():
    """Create a CDK app for testing (module-scoped for performance)"""
    return core.App()


@pytest.fixture(scope="module")
def cdk_stack(cdk_app):
    """Create an empty stack holding only the KafkaMetadata construct"""
    stack = core.Stack(cdk_app, InfraConfig.STACK_NAME)
    KafkaMetadata(stack, "Msk", KafkaMetadataConfig(cluster_arn=InfraConfig.CLUSTER_ARN))
    return stack


@pytest.fixture(scope="module")
def template(cdk_stack):
    """Generate CloudFormation template from the stack (module-scoped for performance)"""
    return assertions.Template.from_stack(cdk_stack)


@pytest.fixture(scope="module")
def msk_metadata_stack():
    """Create the MskMetadataStack from CDK context (module-scoped for performance)"""
    app = core.App(context={"clusterArn": InfraConfig.CLUSTER_ARN})
    return MskMetadataStack(app, "test-msk-metadata", MskMetadataStackConfig.from_context(app))


@pytest.fixture(scope="module")
def stack_template(msk_metadata_stack):
    """Generate CloudFormation template from the MskMetadataStack"""
    return assertions.Template.from_stack(msk_metadata_stack)


@pytest.fixture
def snapshot(request):
    """Compare a JSON-serializable value against a recorded snapshot file

    Snapshots live in tests/unit/__snapshots__ and are only written when
    pytest runs with --snapshot-update.
    """
    update = request.config.getoption("--snapshot-update")

    def assert_match(value, name: str):
        assert_matches_snapshot(value, SNAPSHOT_DIR / f"{name}.json", update=update)

    return assert_match
