"""Abstract factories: families of storage workers and of robot products."""

from __future__ import annotations

from typing import Protocol


def _say(text: str) -> str:
    print(text)
    return text


class Order(Protocol):
    def save_order(self) -> str: ...


class OrderDetail(Protocol):
    def save_order_detail(self) -> str: ...


class MySQLOrderWorker:
    def save_order(self) -> str:
        return _say("MySQL save main order")


class NewSQLOrderWorker:
    def save_order_detail(self) -> str:
        return _say("NewSQL save OrderDetail")


class SQLFactory:
    """Relational storage: MySQL for orders, NewSQL for details."""

    def create_order_worker(self) -> Order:
        return MySQLOrderWorker()

    def create_order_detail_worker(self) -> OrderDetail:
        return NewSQLOrderWorker()


class MongoDBWorker:
    def save_order(self) -> str:
        return _say("MongoDB save main order")


class PouchDBWorker:
    def save_order_detail(self) -> str:
        return _say("PouchDBWorker save OrderDetail")


class NoSQLFactory:
    """Non-relational storage: MongoDB for orders, PouchDB for details."""

    def create_order_worker(self) -> Order:
        return MongoDBWorker()

    def create_order_detail_worker(self) -> OrderDetail:
        return PouchDBWorker()


class Robot(Protocol):
    def name(self) -> str: ...

    def do_work(self) -> str: ...


class HomeRobot:
    def name(self) -> str:
        return "home robot"

    def do_work(self) -> str:
        return _say("robot is cleaning home")


class HomeBattery:
    def charge(self, robot: Robot) -> str:
        """Charge ``robot``; return the text shown."""
        return _say(f"HomeBattery is charging for:{robot.name()}")


class HomeRobotFactory:
    """Makes home robots and batteries that fit them."""

    def create_robot(self) -> HomeRobot:
        return HomeRobot()

    def create_battery(self) -> HomeBattery:
        return HomeBattery()