from dishka import Provider, Scope, provide
from core.environment.config import Settings


class EnvironmentProvider(Provider):
    """
    Provider for suite configuration.

    Parameters
    ----------
    settings : Settings | None
        Preset settings; read from the environment when omitted
    """

    component = "environment"
    scope = Scope.APP

    def __init__(self, settings: Settings | None = None):
        super().__init__()
        self.settings = settings

    @provide
    def get_environment(self) -> Settings:
        """
        Provide suite settings.

        Returns
        -------
        Settings
            Settings instance
        """
        return self.settings or Settings()
