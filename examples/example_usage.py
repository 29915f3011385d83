"""Example: drive a management page without Flask.

Controllers are thin; the list/dialog objects below are what every page uses.
"""

import importlib

from config import get_settings_module

from src.workforce_dashboard.workforce_dashboard.container import build_container


class PrintNotifier:
    def success(self, message):
        print("[ok]", message)

    def error(self, message):
        print("[error]", message)

    def info(self, message):
        print("[info]", message)


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    page = container.departments.open_page(PrintNotifier())
    if page.listing.load():
        for dept in page.listing.filter("eng"):
            print(dept.id, dept.name)

    page.form.open_add()
    page.form.set_field("name", "Operations")
    page.form.submit()

    leaves = container.leaves.open_page(PrintNotifier())
    leaves.listing.load()
    for leave in leaves.listing.items:
        print(leave.employee_name, leave.leave_type, leave.days, leave.status)


if __name__ == "__main__":
    main()
