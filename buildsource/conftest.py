import json

import pulumi
import pytest

_ACCOUNT_ID = "123456789012"
_REGION = "us-east-1"


class MyMocks(pulumi.runtime.Mocks):
    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        outputs = dict(args.inputs)
        if args.typ == "aws:codecommit/repository:Repository":
            outputs["arn"] = f"arn:aws:codecommit:{_REGION}:{_ACCOUNT_ID}:{args.name}"
            outputs["cloneUrlHttp"] = (
                f"https://git-codecommit.{_REGION}.amazonaws.com/v1/repos/{args.name}"
            )
        elif args.typ == "aws:iam/role:Role":
            outputs["arn"] = f"arn:aws:iam::{_ACCOUNT_ID}:role/{args.name}"
        elif args.typ == "aws:codebuild/project:Project":
            outputs["arn"] = (
                f"arn:aws:codebuild:{_REGION}:{_ACCOUNT_ID}:project/{args.name}"
            )
        elif args.typ == "aws:s3/bucketV2:BucketV2":
            outputs["arn"] = f"arn:aws:s3:::{args.name}"
        return [args.name + "_id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        if args.token == "aws:iam/getPolicyDocument:getPolicyDocument":
            return {"json": json.dumps(args.args, default=str)}
        return {}


@pytest.fixture(autouse=True)
def pulumi_mocks():
    pulumi.runtime.set_mocks(
        MyMocks(),
        preview=False,
    )
    yield
