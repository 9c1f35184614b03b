"""Kinds of outbound messages the storefront sends."""

from enum import Enum


class MessageType(Enum):
    NEW_ORDER = "NewOrder"
    COURIER_ASSIGNMENT = "CourierAssignment"
