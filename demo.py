#!/usr/bin/env python3
"""
Scripted walk-through of the reservation ledger.
Replays a fixed set of bookings and cancellations and logs each outcome.
"""

import logging
from typing import Optional

from domain.entities import HotelReservationManager
from domain.exceptions import ReservationError
from domain.value_objects import Client

logger = logging.getLogger(__name__)


def run_examples(manager: Optional[HotelReservationManager] = None) -> HotelReservationManager:
    """Run the six example scenarios against manager and return it"""
    if manager is None:
        manager = HotelReservationManager()

    # 1: valid booking with breakfast
    try:
        clients = [Client(name="Goku", age=30, height=175), Client(name="Vegeta", age=35, height=180)]
        reservation = manager.add_reservation(clients, duration=3, breakfast_option=True)
        logger.info("Example 1 added: %s", reservation)
    except ReservationError as e:
        logger.error("Example 1 failed: %s", e)

    # 2: second booking, gets the next ID
    try:
        clients = [Client(name="Piccolo", age=25, height=190), Client(name="Gohan", age=18, height=175)]
        reservation = manager.add_reservation(clients, duration=5, breakfast_option=False)
        logger.info("Example 2 added: %s", reservation)
    except ReservationError as e:
        logger.error("Example 2 failed: %s", e)

    # 3: Goku is already booked
    try:
        clients = [Client(name="Goku", age=30, height=175), Client(name="Krillin", age=28, height=160)]
        reservation = manager.add_reservation(clients, duration=2, breakfast_option=True)
        logger.info("Example 3 added: %s", reservation)
    except ReservationError as e:
        logger.error("Example 3 failed: %s", e)

    # 4: Vegeta is already booked, so nothing to cancel
    try:
        clients = [Client(name="Vegeta", age=35, height=180), Client(name="Trunks", age=10, height=130)]
        reservation = manager.add_reservation(clients, duration=4, breakfast_option=False)
        logger.info("Example 4 added: %s", reservation)
        manager.cancel_reservation(reservation.unique_id)
        logger.info("Example 4 cancelled")
    except ReservationError as e:
        logger.error("Example 4 failed: %s", e)

    # 5: unknown ID
    try:
        manager.cancel_reservation(999)
    except ReservationError as e:
        logger.error("Example 5 failed: %s", e)

    # 6: same stay for two parties sharing Yamcha
    try:
        first = manager.add_reservation(
            [Client(name="Yamcha", age=28, height=180), Client(name="Tien", age=30, height=175)],
            duration=2,
            breakfast_option=True
        )
        logger.info("Example 6a added: %s", first)
        second = manager.add_reservation(
            [Client(name="Krillin", age=28, height=160), Client(name="Yamcha", age=28, height=180)],
            duration=2,
            breakfast_option=True
        )
        logger.info("Example 6b added: %s", second)
    except ReservationError as e:
        logger.error("Example 6 failed: %s", e)

    return manager


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    ledger = run_examples()
    print("\nCurrent reservations:")
    for r in ledger.all_reservations:
        print(f"  #{r.unique_id} {', '.join(r.client_names())} - {r.duration} night(s), "
              f"breakfast={r.breakfast_option}, price={ledger.calculate_reservation_price(r)}")
