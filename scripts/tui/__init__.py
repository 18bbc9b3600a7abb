"""
Task Board TUI - Terminal User Interface for a local task list.

Architecture:
- providers.py: Task record and storage/source protocols
- storage_provider.py: File and in-memory key-value storage
- views/: Textual screen/widget components
- app.py: Main application entry point

Extensibility points:
1. New storage backends: Implement the KeyValueStorage protocol
2. New widgets: Create composable widgets in views/widgets.py
"""
