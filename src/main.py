import sys

from managing_system import ManagingSystem


def main():
    """Main application entry point"""
    system = ManagingSystem()   # Owns the vehicles and the vehicles.txt store
    return system.run()         # Always 0; failures are printed, not signalled


# Ensure main() only runs if this script is executed directly
if __name__ == "__main__":
    sys.exit(main())
