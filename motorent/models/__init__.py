# Motorent — Database Models
# Import all models here for SQLAlchemy discovery

from motorent.models.motorcycle import Motorcycle         # noqa
from motorent.models.driver import Driver                 # noqa
from motorent.models.rental import Rental                 # noqa
from motorent.models.notification import Notification     # noqa
