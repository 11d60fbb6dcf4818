import logging

import pandas as pd

from beverage_shop.menu.beverage import Beverage, overrides, unwrap


schema = ["item", "cost"]


def itemize(beverage: Beverage) -> pd.DataFrame:
    base, condiments = unwrap(beverage)
    rows = [[base.get_description(), base.get_cost()]]
    for c in condiments:
        cost = c.get_cost() - c._beverage.get_cost() if overrides(c, "get_cost") else c.extra_cost
        rows.append([c.label or type(c).__name__, cost])
    return pd.DataFrame(rows, columns=schema)


class Receipt:
    def show(self, beverage: Beverage):
        df = itemize(beverage)
        lines = [f"Receipt for {beverage.get_description()}:"]
        for item, cost in df.values.tolist():
            lines.append(f"  - {item:<12} {cost:6.2f}")
        lines.append(f"  = {'Total':<12} {df['cost'].sum():6.2f}")
        logging.info("\n" + "\n".join(lines))
