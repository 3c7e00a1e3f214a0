"""Institute Sync package.

Receives backup batches (students, attendance) from the teacher system, merges
them into JSON collections and serves read/report endpoints over them.
Organized by feature modules (sync, students, attendance, system) with a thin
Flask controller layer over service/repository layers.
"""
