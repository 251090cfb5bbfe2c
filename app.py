#!/usr/bin/env python3
import aws_cdk as cdk

from msk_metadata_cdk.config import MskMetadataStackConfig
from msk_metadata_cdk.msk_metadata_stack import MskMetadataStack


app = cdk.App()
MskMetadataStack(app, "MskMetadataStack", MskMetadataStackConfig.from_context(app))

app.synth()
