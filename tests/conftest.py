"""Shared fixtures."""

import pytest

from fakes import FakeInventory, WhitespaceAnnotator, bank_senses
from lesk_wsd.wsd.bag_of_words import BagOfWordsBuilder
from lesk_wsd.wsd.base import InventoryPOS


@pytest.fixture
def bank_inventory() -> FakeInventory:
    return FakeInventory({("bank", InventoryPOS.NOUN): bank_senses()})


@pytest.fixture
def bag_builder() -> BagOfWordsBuilder:
    return BagOfWordsBuilder(stopwords={"a", "beside", "that", "the", "of"})


@pytest.fixture
def whitespace_annotator() -> WhitespaceAnnotator:
    return WhitespaceAnnotator()
