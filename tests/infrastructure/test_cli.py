"""End-to-end tests for the click CLI."""

import logging

from click.testing import CliRunner

from shop.infrastructure.cli.main import cli
from shop.infrastructure.shipping.console_notifier import (
    ConsoleShippingNotifier,
    LoggingShippingNotifier,
)
from tests.fakes import cheese, tv


def _run(*args: str):
    return CliRunner().invoke(cli, list(args))


class TestDemo:

    def test_prints_shipment_notice_then_receipt(self):
        result = _run("demo")

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "** Shipment notice **",
            "2x Cheese 200g",
            "1x Biscuits 700g",
            "Total package weight 1.1kg",
            "** Checkout receipt **",
            "2x Cheese 200.00",
            "1x Biscuits 150.00",
            "1x ScratchCard 50.00",
            "----------------------",
            "Subtotal 400.00",
            "Shipping 30.00",
            "Amount 430.00",
            "Customer balance 570.00",
        ]


class TestCheckoutCommand:

    def test_digital_only_cart_has_no_shipment(self):
        result = _run("checkout", "--customer", "Ali", "--items", "ScratchCard:2")

        assert result.exit_code == 0, result.output
        assert "Shipment notice" not in result.output
        assert "Shipping 0.00" in result.output
        assert "Customer balance 900.00" in result.output

    def test_insufficient_balance_reported(self):
        result = _run("checkout", "--customer", "Ali", "--items", "TV:1")

        assert result.exit_code == 1
        assert "Error: Insufficient balance" in result.output

    def test_unknown_product_reported(self):
        result = _run("checkout", "--customer", "Ali", "--items", "Gizmo:1")

        assert result.exit_code == 1
        assert "Product not found: 'Gizmo'" in result.output

    def test_malformed_items_rejected(self):
        result = _run("checkout", "--customer", "Ali", "--items", "Cheese")

        assert result.exit_code == 2
        assert "Expected 'ProductName:Quantity'" in result.output

    def test_log_notifier_keeps_stdout_clean(self):
        result = _run("--notifier", "log", "checkout", "--customer", "Ali", "--items", "Cheese:1")

        assert result.exit_code == 0, result.output
        assert "Shipment notice" not in result.output
        assert "Amount 130.00" in result.output


class TestQueries:

    def test_catalog_list(self):
        result = _run("catalog", "list")

        assert result.exit_code == 0, result.output
        for name in ("Cheese", "Biscuits", "TV", "Mobile", "ScratchCard"):
            assert name in result.output

    def test_customer_show(self):
        result = _run("customer", "show", "--name", "Ali")

        assert result.exit_code == 0, result.output
        assert "Balance:  1000.00" in result.output

    def test_customer_show_unknown(self):
        result = _run("customer", "show", "--name", "Bob")
        assert result.exit_code == 1


class TestLoggingShippingNotifier:

    def test_logs_summary(self, caplog):
        c, t = cheese(), tv()
        with caplog.at_level(logging.INFO):
            LoggingShippingNotifier().ship([c, c, t])

        assert "Shipping 2x Cheese (200g each)" in caplog.text
        assert "Total package weight 8400g" in caplog.text

    def test_empty_shipment_is_silent(self, caplog):
        with caplog.at_level(logging.INFO):
            LoggingShippingNotifier().ship([])
        assert caplog.text == ""


class TestConsoleShippingNotifier:

    def test_prints_notice(self, capsys):
        c = cheese()
        ConsoleShippingNotifier().ship([c, c])

        assert capsys.readouterr().out.splitlines() == [
            "** Shipment notice **",
            "2x Cheese 200g",
            "Total package weight 0.4kg",
        ]

    def test_empty_shipment_prints_nothing(self, capsys):
        ConsoleShippingNotifier().ship([])
        assert capsys.readouterr().out == ""
