from buildsource.sources.descriptor import SourceDescriptor


class BuildSource:
    """Source provider definition for a CodeBuild project."""

    def bind(self, project) -> None:
        """Called by the project when the source is added to it.

        This gives the source a chance to grant the project whatever access it
        needs, for example read access on an S3 bucket. The default does nothing.

        Args:
            project: The BuildProject this source was added to. It exposes
                `add_to_role_policy(statement)` and `role`.
        """
        return None

    def describe(self) -> SourceDescriptor:
        raise NotImplementedError(
            f"BuildSource.describe() is not implemented for type: {type(self)}."
        )
