from reactivex import operators as ops

from rxchange import (
    Batch,
    ChangeMessageObserver,
    ChangeType,
    ChangeTypeFilter,
    ListChangeAdapter,
    MetadataFilter,
    SetChangeAdapter,
    SingleChangeAdapter,
)

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Wrapping a single value")
print("-" * 100)
print()

# An adapter owns its value. The initial value is installed without a message.
current_name = SingleChangeAdapter("Alice")

# Every successful update publishes the old and new value.
subscription = current_name.observable.subscribe(
    lambda message: print(f"Name changed: {message.old_data} -> {message.new_data}")
)
current_name.update("Smith")

# Disposing the subscription stops the notifications.
subscription.dispose()
current_name.update("Bob")  # Nothing is printed

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Lists and metadata")
print("-" * 100)
print()

scores = ListChangeAdapter()


def log_change(message):
    print(f"{message.change_type.name}: {message.old_data} -> {message.new_data} ({message.metadata})")


scores.observable.subscribe(log_change)

scores.add(85)                 # Single(85)
scores.add_all([92, 78])       # Batch((92, 78))
scores.update(0, 88)           # Single(88)
scores.remove_at(5)            # Out of range: returns False, nothing is published

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Filtering messages")
print("-" * 100)
print()

# Only batch additions reach this subscriber.
scores.observable.pipe(
    ops.filter(ChangeTypeFilter(ChangeType.ADD) & MetadataFilter(Batch)),
).subscribe(lambda message: print(f"Batch added: {list(message.metadata)}"))

scores.add(70)                 # Filtered out
scores.add_all([60, 65])       # Printed

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Observer classes")
print("-" * 100)
print()


# Override only the events you care about.
class TagLogger(ChangeMessageObserver):
    def on_add(self, message):
        print(f"Tag added: {message.metadata}")

    def on_remove(self, message):
        print(f"Tag removed: {message.metadata}")

    def on_completed(self):
        print("No more tag changes")


with SetChangeAdapter({"python"}) as tags:
    tags.observable.subscribe(TagLogger())
    tags.add("reactive")
    tags.add("python")         # Already a member: returns False
    tags.remove_all({"python", "reactive"})
