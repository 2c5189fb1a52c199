"""Starter programs shown when a language is first selected in the editor."""

_JAVA = """import java.util.*;
import java.io.*;
public class Main {
    public static void main(String[] args) {
        System.out.println("Hello, World!");
    }
}"""

_CPP = """#include <iostream>
using namespace std;

int main() {
    cout << "Hello, World!" << endl;
    return 0;
}"""

_C = """#include <stdio.h>

int main() {
    printf("Hello, World!\\n");
    return 0;
}"""

_CSHARP = """using System;

class Program {
    static void Main() {
        Console.WriteLine("Hello, World!");
    }
}"""

_GO = """package main

import "fmt"

func main() {
    fmt.Println("Hello, World!")
}"""

_RUST = """fn main() {
    println!("Hello, World!");
}"""

_PHP = """<?php
echo "Hello, World!";
?>"""

STARTER_TEMPLATES: dict[str, str] = {
    "python": 'print("Hello, World!")',
    "java": _JAVA,
    "javascript": 'console.log("Hello, World!");',
    "typescript": 'console.log("Hello, World!");',
    "cpp": _CPP,
    "c": _C,
    "csharp": _CSHARP,
    "go": _GO,
    "rust": _RUST,
    "php": _PHP,
    "ruby": 'puts "Hello, World!"',
}


def starter_template(language: str) -> str:
    """Return the "Hello, World!" program for a language, or an empty string."""
    return STARTER_TEMPLATES.get(language, "")
