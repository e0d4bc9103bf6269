class RecipeboxError(Exception):
    pass


class ConfigError(RecipeboxError):
    pass


class MissingFileError(RecipeboxError):
    pass


class SeedError(RecipeboxError):
    pass


class RecipeNotFoundError(RecipeboxError):
    pass


class InputClosedError(RecipeboxError):
    pass
