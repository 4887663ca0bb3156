from car import Car
from motorbike import Motorbike
from vehicle import COMPANY_NAME, InvalidVehicleError
from vehicle_file import VehicleFile


class ManagingSystem:
    """Owns the vehicle collection and walks through the demonstration steps"""

    def __init__(self, vehicle_file=None):
        """Initialize management system"""
        self.vehicles = []          # Owned vehicles, in creation order
        self.vehicle_count = 0      # Vehicles ever created here; never decremented
        self.vehicle_file = vehicle_file or VehicleFile()

    def display_header(self):
        print("=== VEHICLE MANAGEMENT SYSTEM ===")
        print(f"Company: {COMPANY_NAME}\n")

    def add_vehicle(self, vehicle_class, brand, model, value):
        """Build a vehicle, take ownership of it and count it"""
        vehicle = vehicle_class(brand, model, value)  # may raise InvalidVehicleError
        self.vehicles.append(vehicle)
        self.vehicle_count += 1
        return vehicle

    def create_vehicles(self):
        print("=== CREATING VEHICLES ===")
        self.add_vehicle(Car, "Toyota", "Camry", 5)
        self.add_vehicle(Car, "Honda", "Civic", 4)
        self.add_vehicle(Motorbike, "Yamaha", "MT-07", 689)
        self.add_vehicle(Motorbike, "Kawasaki", "Ninja", 649)
        print(f"Total vehicles created: {self.vehicle_count}\n")

    def display_all(self):
        """Display every vehicle through the shared interface"""
        print("=== DISPLAYING VEHICLE INFORMATION (POLYMORPHISM) ===")
        for vehicle in self.vehicles:
            vehicle.display_info()
        print()

    def update_model_demo(self, new_model="Corolla"):
        print("=== UPDATING VEHICLE MODELS ===")
        car = next(v for v in self.vehicles if isinstance(v, Car))
        print("Before update: ", end="")
        car.display_info()
        car.update_model(new_model)
        print("After update: ", end="")
        car.display_info()
        print()

    def file_handling_demo(self):
        print("=== FILE HANDLING DEMONSTRATION ===")
        print("Writing vehicle details to file...")
        if self.vehicle_file.write_all(self.vehicles) is None:
            return

        print("\nReading vehicle details from file...")
        if self.vehicle_file.read_all() is None:
            return
        print()

    def exception_demo(self):
        print("=== EXCEPTION HANDLING DEMONSTRATION ===")

        try:
            print("Testing invalid seats...")
            Car("Test", "Model", -2)
        except InvalidVehicleError as e:
            print(f"Caught exception: {e}")

        try:
            print("Testing invalid engine capacity...")
            Motorbike("Test", "Model", -100)
        except InvalidVehicleError as e:
            print(f"Caught exception: {e}")
        print()

    def cleanup(self):
        self.vehicles.clear()

    def run(self):
        """Run every step in order; a failure skips straight to cleanup"""
        self.display_header()
        try:
            self.create_vehicles()
            self.display_all()
            self.update_model_demo()
            self.file_handling_demo()
            self.exception_demo()
        except Exception as e:
            print(f"Error: {e}")

        self.cleanup()
        return 0
