from reactivex import operators as ops

from rxchange import MapChangeAdapter

# A cart maps item names to quantities
cart = MapChangeAdapter({"apple": 1}, name="cart")
prices = {"apple": 0.5, "bread": 2.25, "milk": 1.2}


def update_ui(total: float):
    print(f">>> Cart Total: ${total:.2f}")


# Every change message carries the full cart after the change, so the total
# can be recomputed from new_data alone.
cart.observable.pipe(
    ops.map(lambda message: sum(prices[name] * qty for name, qty in message.new_data.items()))
).subscribe(update_ui)

print("=" * 50)

cart.add("bread", 2)
cart.update("apple", 4)
cart.add_all({"milk": 1})
cart.remove("bread")

# ==================================================
# >>> Cart Total: $5.00
# >>> Cart Total: $6.50
# >>> Cart Total: $7.70
# >>> Cart Total: $3.20
