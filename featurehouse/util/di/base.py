from dishka import Provider as DishkaProvider

from featurehouse.util.di.scope import Scope


class Provider(DishkaProvider):
    """Base for featurehouse DI providers. Factories default to APP scope."""

    scope = Scope.APP
