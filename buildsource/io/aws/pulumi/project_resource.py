import pulumi
import pulumi_aws

from buildsource.io.aws.pulumi.providers import aws_provider
from buildsource.io.aws.pulumi.utils import arn_to_cloud_console_url


class BuildProjectResource(pulumi.ComponentResource):
    """The role, role policy and CodeBuild project for a BuildProject.

    GitHub sources with a token also get a codebuild SourceCredential. AWS keeps
    a single GitHub credential per account and region, so every GitHub project
    deployed with a token to the same account and region replaces the previous
    one. Give only one project per account and region a token.
    """

    def __init__(
        self,
        # A buildsource.core.project.BuildProject
        project,
        opts: pulumi.ResourceOptions,
    ):
        super().__init__(
            "buildsource:aws:codebuild:Project",
            f"buildsource-{project.project_name}",
            None,
            opts,
        )

        outputs = {}

        provider = aws_provider(
            f"{project.project_name}-provider",
            aws_account_id=project.aws_account_id,
            aws_region=project.aws_region,
        )
        child_opts = pulumi.ResourceOptions(parent=self, provider=provider)
        invoke_opts = pulumi.InvokeOptions(parent=self, provider=provider)

        role = project.role
        assume_role_policy = pulumi_aws.iam.get_policy_document_output(
            statements=[
                pulumi_aws.iam.GetPolicyDocumentStatementArgs(
                    effect="Allow",
                    principals=[
                        pulumi_aws.iam.GetPolicyDocumentStatementPrincipalArgs(
                            type="Service",
                            identifiers=["codebuild.amazonaws.com"],
                        )
                    ],
                    actions=["sts:AssumeRole"],
                )
            ],
            opts=invoke_opts,
        )
        self.role_resource = pulumi_aws.iam.Role(
            resource_name=role.role_name,
            name=role.role_name,
            assume_role_policy=assume_role_policy.json,
            opts=child_opts,
        )
        outputs["aws.iam.role"] = self.role_resource.id
        self.role_console_url = pulumi.Output.all(self.role_resource.arn).apply(
            arn_to_cloud_console_url
        )
        outputs["buildsource.cloud_console.role_url"] = self.role_console_url

        project_depends_on = []
        self.role_policy_resource = None
        if role.statements:
            policy_document = pulumi_aws.iam.get_policy_document_output(
                statements=[s.to_pulumi_args() for s in role.statements],
                opts=invoke_opts,
            )
            self.role_policy_resource = pulumi_aws.iam.RolePolicy(
                resource_name=f"{role.role_name}-policy",
                role=self.role_resource.id,
                policy=policy_document.json,
                opts=child_opts,
            )
            project_depends_on.append(self.role_policy_resource)

        source = project.source.describe()
        self.source_credential_resource = None
        if source.auth is not None:
            self.source_credential_resource = pulumi_aws.codebuild.SourceCredential(
                resource_name=f"{project.project_name}-source-credential",
                auth_type="PERSONAL_ACCESS_TOKEN",
                server_type="GITHUB",
                token=pulumi.Output.secret(source.auth.resource),
                opts=child_opts,
            )
            project_depends_on.append(self.source_credential_resource)

        environment = project.environment
        self.project_resource = pulumi_aws.codebuild.Project(
            resource_name=project.project_name,
            name=project.project_name,
            description=project.description,
            service_role=self.role_resource.arn,
            source=source.to_pulumi_args(),
            artifacts=pulumi_aws.codebuild.ProjectArtifactsArgs(
                type=project.artifacts_type.value,
            ),
            environment=pulumi_aws.codebuild.ProjectEnvironmentArgs(
                compute_type=environment.compute_type,
                image=environment.image,
                type=environment.type,
                privileged_mode=environment.privileged_mode,
            ),
            opts=pulumi.ResourceOptions.merge(
                child_opts, pulumi.ResourceOptions(depends_on=project_depends_on)
            ),
        )
        outputs["aws.codebuild.project"] = self.project_resource.id
        self.console_url = pulumi.Output.all(self.project_resource.arn).apply(
            arn_to_cloud_console_url
        )
        outputs["buildsource.cloud_console.url"] = self.console_url

        self.register_outputs(outputs)
