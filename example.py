"""Example usage of the data_structures library."""

from data_structures import OrderedCollection, Record

# An ordered collection keeps its items indexed 0..n-1
queue = OrderedCollection(["1st", "2nd", "3rd"])
queue.push("4th").unshift("0th")

print(queue.get_first())  # 0th
print(queue.shift())  # 0th
queue.unset(1)  # removes "2nd", "3rd" moves to index 1
print(queue[1])  # 3rd

# Setting beyond the end appends
queue.set(42, "5th")
print(queue.get_keys())  # [0, 1, 2, 3]

# Sort with a three-way comparator
queue.sort(lambda a, b: (a > b) - (a < b))
for index, item in queue:
    print(f"{index}: {item}")

# Records expose fields through accessor methods
person = Record({"name": "Ada"})
person.setBirthYear(1815)
print(person.getBirthYear())  # 1815
print(person.get_data_as_dict())  # {'name': 'Ada', 'birth_year': 1815}
