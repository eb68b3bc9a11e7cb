from __future__ import annotations

from table_toolkit import TableService, parse_number

DATA = """city,population,area,density,country
Shanghai,24256800,6340,3826,China
Delhi,16787941,1484,11313,India
Lagos,16060303,1171,13712,Nigeria
Istanbul,14160467,5461,2593,Turkey
Tokyo,13513734,2191,6168,Japan
Sao Paulo,12038175,1521,7914,Brazil
Mexico City,8874724,1486,5974,Mexico
London,8673713,1572,5431,United Kingdom
New York City,8537673,784,10892,United States
Bangkok,8280925,1569,5279,Thailand"""


def main() -> None:
    service = TableService(DATA).where("density", parse_number).sort("density", "DESC")
    densest = max(service.get_column("density"))
    service.add_column("relative", "density", lambda value: round(value * 100 / densest))
    service.format().print()


if __name__ == "__main__":
    main()
