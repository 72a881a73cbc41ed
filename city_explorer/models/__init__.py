# Import every model here so Base.metadata.create_all() sees them.
# locations must be registered before the tables that FK-reference it.

from city_explorer.models.location import LocationRow    # noqa: F401
from city_explorer.models.weather import WeatherRow      # noqa: F401
from city_explorer.models.event import EventRow          # noqa: F401
