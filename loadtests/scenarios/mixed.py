"""Mixed workload scenario.

Combines the account, catalogue and ordering journeys with weights that
model a typical storefront: mostly browsing, some ordering, a little
catalogue maintenance. This is the recommended scenario for a load baseline.
"""

from locust import HttpUser, between

from loadtests.scenarios.auth import NewAccountJourney
from loadtests.scenarios.catalogue import BrowseCatalogue, CatalogueMaintenanceJourney
from loadtests.scenarios.ordering import ShopperJourney, StockContentionJourney


class MixedWorkloadUser(HttpUser):
    """Realistic mixed workload.

    Browsing (45%): anonymous listings, categories and product pages.
    Ordering (35%): register, browse, order and read orders back.
    Accounts (10%): registration and login on their own.
    Catalogue (10%): admin product creation and updates, plus stock contention.
    """

    wait_time = between(0.5, 3.0)
    tasks = {
        BrowseCatalogue: 9,
        ShopperJourney: 7,
        NewAccountJourney: 2,
        CatalogueMaintenanceJourney: 1,
        StockContentionJourney: 1,
    }
