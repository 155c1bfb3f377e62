# /qa_suite/services/example_library.py

"""Sample inputs behind the "Try Example" buttons of each form."""

FRONTEND_EXAMPLES = {
    "react": """import { useState } from 'react';

export function Counter() {
  const [count, setCount] = useState(0);

  return (
    <div>
      <h1>Count: {count}</h1>
      <button onClick={() => setCount(count + 1)}>
        Increment
      </button>
      <button onClick={() => setCount(0)}>
        Reset
      </button>
    </div>
  );
}""",

    "vue": """<template>
  <div>
    <h1>Count: {{ count }}</h1>
    <button @click="increment">Increment</button>
    <button @click="reset">Reset</button>
  </div>
</template>

<script>
export default {
  data() {
    return {
      count: 0
    };
  },
  methods: {
    increment() {
      this.count++;
    },
    reset() {
      this.count = 0;
    }
  }
};
</script>""",

    "svelte": """<script>
  let count = 0;

  function increment() {
    count += 1;
  }

  function reset() {
    count = 0;
  }
</script>

<div>
  <h1>Count: {count}</h1>
  <button on:click={increment}>Increment</button>
  <button on:click={reset}>Reset</button>
</div>""",
}

BACKEND_EXAMPLES = {
    "python": '''def calculate_total(items, tax_rate=0.1):
    """Calculate total price with tax."""
    if not items:
        raise ValueError("Items list cannot be empty")

    subtotal = sum(item['price'] * item['quantity'] for item in items)
    tax = subtotal * tax_rate
    return round(subtotal + tax, 2)''',

    "node": """const express = require('express');
const router = express.Router();

router.get('/users/:id', async (req, res) => {
  const userId = parseInt(req.params.id);
  if (isNaN(userId) || userId <= 0) {
    return res.status(400).json({ error: 'Invalid user ID' });
  }
  const user = await db.getUserById(userId);
  if (!user) {
    return res.status(404).json({ error: 'User not found' });
  }
  res.json(user);
});

module.exports = router;""",

    "go": """package calculator

import "errors"

type Item struct {
    Price    float64
    Quantity int
}

func CalculateTotal(items []Item, taxRate float64) (float64, error) {
    if len(items) == 0 {
        return 0, errors.New("items list cannot be empty")
    }
    var subtotal float64
    for _, item := range items {
        subtotal += item.Price * float64(item.Quantity)
    }
    return subtotal * (1 + taxRate), nil
}""",

    "java": """public class UserService {
    private final UserRepository userRepository;

    public UserService(UserRepository userRepository) {
        this.userRepository = userRepository;
    }

    public User getUserById(Long userId) {
        if (userId == null || userId <= 0) {
            throw new IllegalArgumentException("Invalid user ID");
        }
        return userRepository.findById(userId)
            .orElseThrow(() -> new UserNotFoundException("User " + userId + " not found"));
    }
}""",

    "ruby": """class OrderCalculator
  def initialize(tax_rate: 0.1)
    @tax_rate = tax_rate
  end

  def calculate_total(items)
    raise ArgumentError, 'Items cannot be empty' if items.empty?

    subtotal = items.sum { |item| item[:price] * item[:quantity] }
    (subtotal * (1 + @tax_rate)).round(2)
  end
end""",

    "php": """<?php

class UserService {
    public function __construct(private UserRepository $userRepository) {}

    public function getUserById(int $userId): User {
        if ($userId <= 0) {
            throw new InvalidArgumentException('Invalid user ID');
        }
        $user = $this->userRepository->find($userId);
        if ($user === null) {
            throw new UserNotFoundException("User with id {$userId} not found");
        }
        return $user;
    }
}""",
}

ERROR_EXPLAINER_EXAMPLE = {
    "code": """function UserList({ users }) {
  return (
    <div>
      <h1>Users</h1>
      <ul>
        {users.map(user => (
          <li key={user.id}>{user.name}</li>
        ))}
      </ul>
    </div>
  );
}""",
    "error": """TypeError: Cannot read property 'map' of undefined
    at UserList (UserList.js:6:16)""",
}

BUG_FORMATTER_EXAMPLE = (
    "hey the login button doesnt work when i click it says undefined and also the colors "
    "look weird on my phone maybe its the css? idk but its broken on safari too"
)
