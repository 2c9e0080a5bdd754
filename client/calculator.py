from typing import Optional

OPERATIONS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "×": lambda a, b: a * b,
    "÷": lambda a, b: a / b if b != 0 else 0,
}
OPERATION_ALIASES = {"*": "×", "x": "×", "/": "÷"}


def apply_operation(first: float, second: float, operation: str) -> float:
    operation = OPERATION_ALIASES.get(operation, operation)
    func = OPERATIONS.get(operation)
    if func is None:
        return second
    return func(first, second)


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class Calculator:
    """Four-function calculator widget state, driven one key press at a time."""

    def __init__(self):
        self.is_open = False
        self.clear()

    def open(self):
        self.is_open = True

    def close(self):
        self.is_open = False

    def toggle(self):
        self.is_open = not self.is_open

    def clear(self):
        self.display = "0"
        self.previous_value: Optional[float] = None
        self.operation: Optional[str] = None
        self.waiting_for_new_value = False

    def input_number(self, digit: str):
        if self.waiting_for_new_value:
            self.display = digit
            self.waiting_for_new_value = False
        else:
            self.display = digit if self.display == "0" else self.display + digit

    def input_decimal(self):
        if self.waiting_for_new_value:
            self.display = "0."
            self.waiting_for_new_value = False
        elif "." not in self.display:
            self.display += "."

    def input_operation(self, operation: str):
        operation = OPERATION_ALIASES.get(operation, operation)
        if operation not in OPERATIONS:
            raise ValueError(f"unsupported operation: {operation}")

        if self.previous_value is not None and self.waiting_for_new_value:
            # Operator pressed twice in a row: swap it
            self.operation = operation
            return

        value = float(self.display)
        if self.previous_value is None:
            self.previous_value = value
        elif self.operation:
            result = apply_operation(self.previous_value, value, self.operation)
            self.display = format_number(result)
            self.previous_value = result

        self.operation = operation
        self.waiting_for_new_value = True

    def calculate(self):
        if self.previous_value is None or not self.operation:
            return
        result = apply_operation(self.previous_value, float(self.display), self.operation)
        self.display = format_number(result)
        self.previous_value = None
        self.operation = None
        self.waiting_for_new_value = True

    def press(self, key: str):
        """Dispatch a single button label, as the widget's keypad does."""
        if key == "C":
            self.clear()
        elif key == "=":
            self.calculate()
        elif key == ".":
            self.input_decimal()
        elif key.isdigit():
            self.input_number(key)
        else:
            self.input_operation(key)
