from patternkit.core.config import get_app_settings
from patternkit.core.exceptions import SettingKeyNotFoundError, SettingsError
from patternkit.core.service_manager import ServiceManager
from patternkit.schemas.order import Discount, LineItem, Order
from patternkit.schemas.report import ReportFormat
from patternkit.services.order_summary import describe_order
from patternkit.services.report_builder import ReportBuilder
import logging

logger = logging.getLogger(__name__)


def run_settings_demo(service_manager: ServiceManager, settings_file: str, source_identifier: str):
    print("--- 1. SINGLETON PATTERN ---")

    store1 = service_manager.get_settings_store()
    store1.load_defaults()
    store1.set("app.theme", "dark")
    store1.set("app.language", "en")
    print(store1.dump())

    store2 = service_manager.get_settings_store()
    print(f"app.theme read through store2 = {store2.get('app.theme')}")
    print(f"store1 and store2 are the same instance? {store1 is store2}")

    try:
        store1.save_to_file(settings_file)
        store3 = service_manager.get_settings_store()
        store3.load_from_file(settings_file)
        print(store3.dump())
    except SettingsError as e:
        print(f"Error: {e}")

    store1.load_from_source(source_identifier)
    print(f"db.host = {store1.get_or_default('db.host', 'unknown')}")

    try:
        print("\nReading a missing setting:")
        store1.get("nonexistent.key")
    except SettingKeyNotFoundError as e:
        print(f"Handled error: {e}")


def run_report_demo(service_manager: ServiceManager):
    print("\n--- 2. BUILDER PATTERN ---")

    director = service_manager.get_report_director()
    header = "Monthly report"
    content = "Sales grew by 20% in January. New customers: 150."
    footer = "Prepared by: Administrator"

    for report_format in ReportFormat:
        document = director.construct_report(ReportBuilder(report_format), header, content, footer)
        print(director.render_report(document, f"{report_format.value.upper()} REPORT"))


def run_order_demo():
    print("\n--- 3. PROTOTYPE PATTERN ---")

    original = Order(order_id="ORD-001")
    original.add_item(LineItem(name="Laptop", price=450000, quantity=1))
    original.add_item(LineItem(name="Mouse", price=15000, quantity=2))
    original.add_item(LineItem(name="Keyboard", price=25000, quantity=1))
    original.set_delivery_cost(5000)
    original.set_discount(Discount(label="New Year", percentage=10))
    original.set_payment_method("Bank transfer")

    print("ORIGINAL ORDER:")
    print(describe_order(original))

    copy = original.duplicate()
    copy.remove_items_named("Mouse")
    copy.add_item(LineItem(name="Wireless mouse", price=18000, quantity=1))
    copy.set_discount(Discount(label="Club", percentage=5))
    copy.set_payment_method("Card")

    print("DUPLICATED ORDER (modified):")
    print(describe_order(copy))
    print("ORIGINAL ORDER (unchanged):")
    print(describe_order(original))
    print(f"original is copy? {original is copy}")


def main() -> int:
    app_settings = get_app_settings()
    logging.basicConfig(
        level=getattr(logging, app_settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    logger.info("Starting creational patterns demo...")
    service_manager = ServiceManager()
    try:
        run_settings_demo(service_manager, app_settings.settings_file, app_settings.source_identifier)
        run_report_demo(service_manager)
        run_order_demo()
        logger.info(f"Application status: {service_manager.get_application_status()}")
    finally:
        service_manager.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
