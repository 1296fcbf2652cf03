import json
import logging
import re

import typer

from buildsource.config.aws_options import AWSOptions
from buildsource.config.buildsource_config import (
    BUILDSOURCE_CONFIG_FILE,
    BuildSourceConfig,
)
from buildsource.core.project import BuildProject
from buildsource.exceptions import (
    MissingAWSSettingException,
    PathNotFoundException,
    UnknownSourceTypeException,
)

logging.basicConfig(level=logging.ERROR)

# CodeBuild project names: letters, numbers, hyphens and underscores.
_PROJECT_NAME_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9_-]{1,254}$"
BUILDSOURCE_HELP = """\
Declare where your CodeBuild projects get their source from.
"""
app = typer.Typer(help=BUILDSOURCE_HELP, pretty_exceptions_enable=False)

DIRECTORY_OPTION = typer.Option(
    ".", help=f"The directory containing {BUILDSOURCE_CONFIG_FILE}."
)
REGION_OPTION = typer.Option(
    None, help="The AWS region to use when the config does not set one."
)
ACCOUNT_ID_OPTION = typer.Option(
    None, help="The AWS account id to use when the config does not set one."
)
VERBOSE_OPTION = typer.Option(False, help="Enable debug logging.")


def _load_project(directory: str, aws_region, aws_account_id) -> BuildProject:
    aws_options = AWSOptions(
        default_region=aws_region, default_account_id=aws_account_id
    )
    try:
        config = BuildSourceConfig.load(directory, aws_options=aws_options)
        return config.build_project()
    except (
        MissingAWSSettingException,
        PathNotFoundException,
        UnknownSourceTypeException,
    ) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)


def _set_verbosity(verbose: bool):
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@app.command(help="Create a buildsource config in a directory.")
def init(
    project_name: str = typer.Option("", help="The name of the CodeBuild project."),
    directory: str = typer.Option(default=".", help="The directory to initialize"),
):
    if not project_name:
        project_name = input("Please enter a project name: ")
    if not re.fullmatch(_PROJECT_NAME_PATTERN, project_name):
        typer.echo(
            "project name must be 2-255 characters of letters, numbers, hyphens "
            "and underscores"
        )
        raise typer.Exit(1)
    try:
        BuildSourceConfig.create(directory, project_name)
    except FileExistsError as e:
        typer.echo(f"{e}, skipping.")
        raise typer.Exit(1)
    typer.echo(f"created {BUILDSOURCE_CONFIG_FILE} for project {project_name}")


@app.command(help="Print the source block of the CodeBuild project.")
def describe(
    directory: str = DIRECTORY_OPTION,
    aws_region: str = REGION_OPTION,
    aws_account_id: str = ACCOUNT_ID_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    _set_verbosity(verbose)
    project = _load_project(directory, aws_region, aws_account_id)
    typer.echo(json.dumps(project.source.describe().asdict(), indent=2))


@app.command(help="Print the policy granted to the project's build role.")
def policy(
    directory: str = DIRECTORY_OPTION,
    aws_region: str = REGION_OPTION,
    aws_account_id: str = ACCOUNT_ID_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    _set_verbosity(verbose)
    project = _load_project(directory, aws_region, aws_account_id)
    typer.echo(json.dumps(project.role.policy_document(), indent=2))


def main():
    app()


if __name__ == "__main__":
    main()
