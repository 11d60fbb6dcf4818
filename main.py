import logging

from beverage_shop.manager.beverage_maker import BeverageMaker
from beverage_shop.manager.customer import Customer
from beverage_shop.menu.beverage import Americano, WhipDecorator
from beverage_shop.menu.receipt import Receipt


logging.basicConfig(level=logging.INFO, format="%(message)s")

customer1 = Customer("John")
customer2 = Customer("Alice")

beverage_maker = BeverageMaker()
beverage_maker.add_observer(customer1)
beverage_maker.add_observer(customer2)

americano_with_whip = WhipDecorator(Americano())
beverage_maker.beverage_is_ready(americano_with_whip)

Receipt().show(americano_with_whip)
