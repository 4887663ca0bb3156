import sys
from itertools import islice

from car import Car
from motorbike import Motorbike

# Leading record token -> vehicle class
VEHICLE_TYPES = {
    Car.TYPE_TAG: Car,
    Motorbike.TYPE_TAG: Motorbike,
}

RECORD_FORMATS = {
    Car.TYPE_TAG: "Car - Brand: {brand}, Model: {model}, Seats: {value}",
    Motorbike.TYPE_TAG: "Motorbike - Brand: {brand}, Model: {model}, Engine Capacity: {value}cc",
}


class VehicleFile:
    """Plain-text store: one 'Type brand model value' record per line."""

    def __init__(self, file_name="vehicles.txt"):
        self.file_name = file_name

    def write_all(self, vehicles):
        """Truncate the file and write every vehicle in order.

        Returns the number of records written, or None if the file could
        not be opened (nothing is written in that case).
        """
        try:
            out_file = open(self.file_name, "w", encoding="utf-8")
        except OSError as e:
            print(f"Error: Could not open file for writing! ({e})", file=sys.stderr)
            return None

        with out_file:
            for vehicle in vehicles:
                out_file.write(vehicle.to_line() + "\n")

        print(f"Successfully wrote {len(vehicles)} vehicles to {self.file_name}")
        return len(vehicles)

    def read_all(self):
        """Print each record read back from the file and return the printed lines."""
        tokens = self._read_tokens()
        if tokens is None:
            return None

        lines = []
        for vehicle_class, brand, model, value in self._iter_records(tokens):
            line = RECORD_FORMATS[vehicle_class.TYPE_TAG].format(brand=brand, model=model, value=value)
            print(line)
            lines.append(line)
        return lines

    def load_vehicles(self):
        tokens = self._read_tokens()
        if tokens is None:
            return None
        return [vehicle_class.restore(brand, model, value)
                for vehicle_class, brand, model, value in self._iter_records(tokens)]

    def _read_tokens(self):
        try:
            with open(self.file_name, "r", encoding="utf-8") as in_file:
                return in_file.read().split()
        except OSError as e:
            print(f"Error: Could not open file for reading! ({e})", file=sys.stderr)
            return None

    @staticmethod
    def _iter_records(tokens):
        # An unknown tag, a short record or a non-integer value ends the stream
        # exactly like a clean end of file.
        stream = iter(tokens)
        for tag in stream:
            vehicle_class = VEHICLE_TYPES.get(tag)
            if vehicle_class is None:
                return
            fields = list(islice(stream, 3))
            if len(fields) < 3:
                return
            brand, model, raw_value = fields
            try:
                value = int(raw_value)
            except ValueError:
                return
            yield vehicle_class, brand, model, value
