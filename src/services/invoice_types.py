from pydantic import BaseModel

class PaintLineItem(BaseModel):
    make: str = "Unknown"
    code: str = ""
    color: str = ""
    quantity: float
    unit: str

    def format_line(self) -> str:
        """Render as 'MAKE | CODE | COLOR | QTY UNIT' for the notes field"""
        return f"{self.make} | {self.code} | {self.color} | {format_quantity(self.quantity)} {self.unit}"


class InvoiceSummary(BaseModel):
    supplier: str = ""
    invoice_number: str = ""
    cost: float | None = None
    notes: str = ""  # Formatted paint items, loose paint lines, or raw-text excerpt


def format_quantity(quantity: float) -> str:
    # 2.0 -> "2", 0.5 -> "0.5"
    if quantity.is_integer():
        return str(int(quantity))
    return repr(quantity)
