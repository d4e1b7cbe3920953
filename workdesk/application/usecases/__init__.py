"""
Use Cases Layer (Business Operations)

Structure
---------
usecases/
├── work_hours/   # logging, listing, export and email of work hours
├── notes/        # personal notes CRUD
└── users/        # mobile lookup, registration, logout, mobile list

Import from subpackages:

    from workdesk.application.usecases.work_hours import AddWorkHoursUseCase
    from workdesk.application.usecases.notes import CreateNoteUseCase
"""
