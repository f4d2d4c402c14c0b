#!/usr/bin/env python3

# -*- coding: utf-8 -*-

""" """


class PushdException(Exception):
    pass


class DirectoryQueryFailed(PushdException):
    def __init__(self, cause):
        self.cause = cause
        super().__init__(f"Could not get current directory: {cause}")


class DirectoryChangeFailed(PushdException):
    def __init__(self, target, cause):
        self.target = target
        self.cause = cause
        super().__init__(f"Could not set current directory to {target}: {cause}")


class DirectoryRestoreFailed(PushdException):
    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not return to original dir {path}: {cause}")
