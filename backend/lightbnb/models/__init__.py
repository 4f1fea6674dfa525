"""SQLAlchemy table declarations for the LightBnB schema.

Test schema setup only. The schema itself is managed outside this package and
nothing at runtime imports these classes: the accessors in
``lightbnb.services`` issue raw SQL. The integration fixtures import this
package so that ``Base.metadata`` can create and truncate the tables of the
``lightbnb_test`` database.
"""

from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation
from lightbnb.models.review import PropertyReview
from lightbnb.models.user import User

__all__ = [
    "Property",
    "PropertyReview",
    "Reservation",
    "User",
]
