"""Classic katas: FizzBuzz and prime numbers."""