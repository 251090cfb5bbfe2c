import logging
import os
from typing import Any, Dict, Optional

import boto3
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)
logger.setLevel(os.environ.get("LOG_LEVEL", "INFO"))


def describe_cluster(cluster_arn: str, kafka: Any) -> Dict[str, str]:
    """Collect connection metadata for a cluster as custom resource attributes."""
    cluster_info = kafka.describe_cluster(ClusterArn=cluster_arn)["ClusterInfo"]
    brokers = kafka.get_bootstrap_brokers(ClusterArn=cluster_arn)

    node_group = cluster_info.get("BrokerNodeGroupInfo", {})
    software = cluster_info.get("CurrentBrokerSoftwareInfo", {})

    return {
        "BootstrapServers": brokers.get("BootstrapBrokerString", ""),
        "BootstrapServersTls": brokers.get("BootstrapBrokerStringTls", ""),
        "BootstrapServersIam": brokers.get("BootstrapBrokerStringSaslIam", ""),
        "KafkaVersion": software.get("KafkaVersion", ""),
        "Subnets": ",".join(node_group.get("ClientSubnets", [])),
        "SecurityGroups": ",".join(node_group.get("SecurityGroups", [])),
    }


def on_event(event: Dict[str, Any], context: Any = None, clients: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Custom resource event handler invoked by the CDK provider framework.

    Create and Update describe the cluster named by the `ClusterArn` resource
    property and return its metadata as attributes. Delete is a no-op since
    nothing is provisioned.

    The function supports dependency injection of `clients` for unit tests. Expected key: 'kafka'.
    """
    request_type = event["RequestType"]
    logger.info("Received %s request for %s", request_type, event.get("LogicalResourceId"))

    if request_type == "Delete":
        return {"PhysicalResourceId": event["PhysicalResourceId"]}

    if request_type not in ("Create", "Update"):
        raise ValueError(f"Unsupported request type: {request_type}")

    cluster_arn = event["ResourceProperties"]["ClusterArn"]
    kafka = clients.get('kafka') if clients and 'kafka' in clients else boto3.client('kafka')

    try:
        data = describe_cluster(cluster_arn, kafka)
    except ClientError as e:
        logger.exception("Failed to read metadata of cluster %s: %s", cluster_arn, e)
        raise

    logger.info("Cluster %s runs Kafka %s", cluster_arn, data["KafkaVersion"] or "<unknown>")

    return {
        "PhysicalResourceId": cluster_arn,
        "Data": data,
    }
