class Config:
    @classmethod
    def default(cls, *args, **kwargs) -> "Config":
        """Returns the default config."""
        raise NotImplementedError("default not implemented")
