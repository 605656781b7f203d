import pytest


@pytest.fixture(autouse=True)
def _ctx(catalogue_bed, identity_bed, ordering_bed):
    """Ordering reads from the catalogue and identity stores, so all three are reset per test."""
    with catalogue_bed.domain_context(), identity_bed.domain_context(), ordering_bed.domain_context():
        yield


@pytest.fixture()
def ledger():
    from catalogue.domain import catalogue
    from catalogue.lookup import MenuCatalog, OfferCatalog
    from identity.directory import AccountDirectory
    from identity.domain import identity
    from ordering.domain import ordering
    from ordering.ledger import OrderLedger
    from ordering.order.book import OrderBook
    from ordering.pricing import OrderPricingEngine

    pricing = OrderPricingEngine(menu=MenuCatalog(catalogue), offers=OfferCatalog(catalogue))
    return OrderLedger(accounts=AccountDirectory(identity), pricing=pricing, orders=OrderBook(ordering))


@pytest.fixture()
def seed():
    """Helpers that put menu items, offers and accounts into their own stores."""
    import json

    from catalogue.domain import catalogue
    from catalogue.menu.management import AddMenuItem
    from catalogue.offer.creation import CreateOffer
    from identity.account.registration import RegisterAccount
    from identity.domain import identity

    class Seed:
        @staticmethod
        def menu_item(item_id, title, price, description=None):
            with catalogue.domain_context():
                return catalogue.process(
                    AddMenuItem(item_id=item_id, title=title, description=description, price=price),
                    asynchronous=False,
                )

        @staticmethod
        def offer(product_ids, bundle_price):
            with catalogue.domain_context():
                return catalogue.process(
                    CreateOffer(products=json.dumps(product_ids), bundle_price=bundle_price),
                    asynchronous=False,
                )

        @staticmethod
        def account(username, email=None, role="customer"):
            with identity.domain_context():
                return identity.process(
                    RegisterAccount(
                        username=username,
                        password="s3cret-pass",
                        email=email or f"{username}@example.com",
                        role=role,
                    ),
                    asynchronous=False,
                )

    return Seed()
