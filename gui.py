import tkinter as tk
from tkinter import ttk, messagebox

from utils.logger import setup_logger
from data.repository import DataRepository
from services.checkout_service import CheckoutService
from services.pricing_service import available_strategies, key_for_label


class CheckoutApp:
    def __init__(self, root: tk.Tk, repo: DataRepository | None = None):
        # core services / data
        self.root = root
        self.root.title("Checkout - Discount Strategies")
        self.root.geometry("520x420")

        self.logger = setup_logger()
        self.repo = repo or DataRepository()
        self.settings = self.repo.get_settings()
        self.checkout_service = CheckoutService(self.repo)

        # (key, label) pairs for the selector
        self.strategies = available_strategies()

        # The one active order / strategy pair, replaced on every change
        self.state = self.checkout_service.start(self.settings["default_discount"])

        self.build_products_frame()
        self.build_discount_frame()
        self.build_summary_frame()

        self.refresh_products_table()
        self.refresh_summary()

    def build_products_frame(self):
        products_frame = ttk.LabelFrame(self.root, text="Products")
        products_frame.pack(fill="both", expand=True, padx=10, pady=10)

        columns = ("name", "price")
        self.products_tree = ttk.Treeview(
            products_frame,
            columns=columns,
            show="headings",
            height=6
        )
        self.products_tree.heading("name", text="Product")
        self.products_tree.heading("price", text="Price")
        self.products_tree.column("name", width=260)
        self.products_tree.column("price", width=120, anchor="e")
        self.products_tree.pack(fill="both", expand=True, padx=5, pady=5)

        reset_btn = ttk.Button(
            products_frame,
            text="Reset Order",
            command=self.gui_reset_order
        )
        reset_btn.pack(anchor="e", padx=5, pady=(0, 5))

    def build_discount_frame(self):
        discount_frame = ttk.LabelFrame(self.root, text="Discount")
        discount_frame.pack(fill="x", padx=10, pady=(0, 10))

        ttk.Label(discount_frame, text="Type:").grid(row=0, column=0, sticky="e", padx=5, pady=5)

        self.discount_var = tk.StringVar()
        self.discount_select = ttk.Combobox(
            discount_frame,
            textvariable=self.discount_var,
            values=[label for _, label in self.strategies],
            state="readonly",
            width=30
        )
        self.discount_select.grid(row=0, column=1, sticky="w", padx=5, pady=5)

        current_key = self.state.strategy.key
        for key, label in self.strategies:
            if key == current_key:
                self.discount_var.set(label)
                break

        self.discount_select.bind("<<ComboboxSelected>>", self.gui_select_discount)

    def build_summary_frame(self):
        summary_frame = ttk.LabelFrame(self.root, text="Summary")
        summary_frame.pack(fill="x", padx=10, pady=(0, 10))

        ttk.Label(summary_frame, text="Subtotal:").grid(row=0, column=0, sticky="e", padx=5, pady=2)
        ttk.Label(summary_frame, text="Discount:").grid(row=1, column=0, sticky="e", padx=5, pady=2)
        ttk.Label(summary_frame, text="Total:").grid(row=2, column=0, sticky="e", padx=5, pady=2)

        self.subtotal_label = ttk.Label(summary_frame, text="")
        self.discount_label = ttk.Label(summary_frame, text="")
        self.total_label = ttk.Label(summary_frame, text="", font=("TkDefaultFont", 11, "bold"))

        self.subtotal_label.grid(row=0, column=1, sticky="w", padx=5, pady=2)
        self.discount_label.grid(row=1, column=1, sticky="w", padx=5, pady=2)
        self.total_label.grid(row=2, column=1, sticky="w", padx=5, pady=2)

    def refresh_products_table(self):
        for row in self.products_tree.get_children():
            self.products_tree.delete(row)

        currency = self.settings["currency"]
        for item in self.state.order.items:
            self.products_tree.insert(
                "",
                "end",
                values=(item.name, f"{currency}{item.price:.2f}")
            )

        self.logger.info("GUI: refreshed products table")

    def refresh_summary(self):
        summary = self.checkout_service.summarize(self.state)
        display = summary.as_display(self.settings["currency"])

        self.subtotal_label.config(text=display["subtotal"])
        self.discount_label.config(text=display["discount"])
        self.total_label.config(text=display["total"])

    def gui_select_discount(self, event=None):
        label = self.discount_var.get()
        key = key_for_label(label)
        self.state = self.checkout_service.select_discount(self.state, key)
        self.refresh_summary()

    def gui_reset_order(self):
        try:
            self.state = self.checkout_service.reset_order(self.state)
        except ValueError as e:
            # bad catalog data, e.g. a negative price
            self.logger.exception(f"GUI: reset order failed: {e}")
            messagebox.showerror("Reset Failed", str(e))
            return

        self.refresh_products_table()
        self.refresh_summary()


def main():
    root = tk.Tk()
    app = CheckoutApp(root)
    root.mainloop()


if __name__ == "__main__":
    main()
